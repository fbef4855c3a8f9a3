"""Postfix (RPN) evaluation with a value stack."""

import math
import operator

import structlog

from calcyard.errors import (
    DivisionByZeroError,
    InsufficientOperandsError,
    MalformedExpressionError,
    NonFiniteResultError,
)
from calcyard.tokens import Token, TokenKind

logger = structlog.get_logger()

DEFAULT_PRECISION = 12

BINARY_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def apply_operator(symbol: str, a: float, b: float) -> float:
    """Compute ``a <symbol> b``."""
    if symbol == "/" and b == 0:
        raise DivisionByZeroError()
    return BINARY_OPERATIONS[symbol](a, b)


def clean_result(value: float, precision: int = DEFAULT_PRECISION) -> float:
    """Round away binary floating-point noise from non-integral results."""
    if not math.isfinite(value):
        raise NonFiniteResultError(value)
    if value.is_integer():
        return value
    return round(value, precision)


def eval_postfix(tokens: list[Token], precision: int = DEFAULT_PRECISION) -> float:
    """
    Reduce a postfix token sequence to a single number.

    Each operator consumes the two most recent values, ``b`` popped first
    and ``a`` second, and pushes ``a op b``.

    Raises:
        InsufficientOperandsError: an operator with fewer than two values.
        DivisionByZeroError: a divisor exactly equal to zero.
        MalformedExpressionError: other than one value left at the end.
        NonFiniteResultError: the result is infinite or NaN.
    """
    stack: list[float] = []

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            stack.append(float(token.text))
        elif token.kind is TokenKind.OPERATOR:
            if len(stack) < 2:
                raise InsufficientOperandsError(token.text)
            b = stack.pop()
            a = stack.pop()
            stack.append(apply_operator(token.text, a, b))
        else:
            # Parentheses never survive to_postfix
            raise MalformedExpressionError(len(stack))

    if len(stack) != 1:
        raise MalformedExpressionError(len(stack))

    result = clean_result(stack[0], precision)
    logger.debug("Evaluated postfix", result=result)
    return result
