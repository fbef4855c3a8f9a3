"""
calcyard - arithmetic expression evaluator

Tokenizes infix expressions over decimal numbers, the four binary
operators, parentheses and unary minus, reorders them into postfix with
the shunting-yard algorithm and evaluates the result on a value stack.
"""

__version__ = "1.0.0"
__author__ = "calcyard team"

from calcyard.log import configure_default_logging

configure_default_logging()

from calcyard.engine import evaluate, trace
from calcyard.errors import (
    DivisionByZeroError,
    ErrorKind,
    EvalError,
    EvaluationError,
    InsufficientOperandsError,
    InvalidCharacterError,
    LexError,
    MalformedExpressionError,
    MalformedNumberError,
    MismatchedParensError,
    NonFiniteResultError,
    ParseError,
)
from calcyard.evaluator import eval_postfix
from calcyard.formatting import format_result
from calcyard.parser import to_postfix
from calcyard.tokenizer import tokenize
from calcyard.tokens import Token, TokenKind

__all__ = [
    "evaluate",
    "trace",
    "tokenize",
    "to_postfix",
    "eval_postfix",
    "format_result",
    "Token",
    "TokenKind",
    "ErrorKind",
    "EvaluationError",
    "LexError",
    "InvalidCharacterError",
    "MalformedNumberError",
    "ParseError",
    "MismatchedParensError",
    "EvalError",
    "InsufficientOperandsError",
    "DivisionByZeroError",
    "MalformedExpressionError",
    "NonFiniteResultError",
]
