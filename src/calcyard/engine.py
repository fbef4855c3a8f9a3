"""
Orchestration of the evaluation pipeline.

``evaluate`` chains tokenize, to_postfix and eval_postfix. The first
failure propagates unchanged, so the caller sees the specific
LexError, ParseError or EvalError subclass.
"""

from dataclasses import dataclass

import structlog

from calcyard.config import settings
from calcyard.errors import EvaluationError
from calcyard.evaluator import eval_postfix
from calcyard.parser import to_postfix
from calcyard.tokenizer import tokenize
from calcyard.tokens import Token

logger = structlog.get_logger()


@dataclass(frozen=True)
class Trace:
    """Intermediate stages of one evaluation, for inspection tools."""
    expression: str
    tokens: list[Token]
    postfix: list[Token]
    result: float


def evaluate(text: str, precision: int | None = None) -> float:
    """Evaluate an arithmetic expression and return its value."""
    return trace(text, precision).result


def trace(text: str, precision: int | None = None) -> Trace:
    """Evaluate ``text`` and keep the token and postfix sequences."""
    if precision is None:
        precision = settings.result_precision

    try:
        tokens = tokenize(text)
        postfix = to_postfix(tokens)
        result = eval_postfix(postfix, precision)
    except EvaluationError as e:
        logger.debug("Evaluation failed", expression=text, kind=e.kind.value, error=e.message)
        raise

    return Trace(expression=text, tokens=tokens, postfix=postfix, result=result)
