"""
Exception hierarchy for expression evaluation.

Every failure raised by the tokenizer, parser or evaluator derives from
EvaluationError and carries a stable ``kind`` code, so callers can tell
lexing, parsing and evaluation failures apart without string matching.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Stable error codes exposed by the CLI and HTTP layers."""
    INVALID_CHARACTER = "invalid_character"
    MALFORMED_NUMBER = "malformed_number"
    MISMATCHED_PARENS = "mismatched_parens"
    INSUFFICIENT_OPERANDS = "insufficient_operands"
    DIVISION_BY_ZERO = "division_by_zero"
    MALFORMED_EXPRESSION = "malformed_expression"
    NON_FINITE_RESULT = "non_finite_result"


class EvaluationError(Exception):
    """Base exception for expression evaluation errors."""
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# =============================================================================
# Lexing
# =============================================================================

class LexError(EvaluationError):
    """Raised when the input text cannot be split into tokens."""
    pass


class InvalidCharacterError(LexError):
    """Raised when the input contains a character outside the grammar."""
    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, char: str, position: int):
        super().__init__(f"Invalid character {char!r} at position {position}")
        self.char = char
        self.position = position


class MalformedNumberError(LexError):
    """Raised when a number literal has no digits or several decimal points."""
    kind = ErrorKind.MALFORMED_NUMBER

    def __init__(self, text: str, position: int):
        super().__init__(f"Malformed number {text!r} at position {position}")
        self.text = text
        self.position = position


# =============================================================================
# Parsing
# =============================================================================

class ParseError(EvaluationError):
    """Raised when the token sequence cannot be reordered into postfix."""
    pass


class MismatchedParensError(ParseError):
    """Raised when parentheses are unbalanced in either direction."""
    kind = ErrorKind.MISMATCHED_PARENS

    def __init__(self, message: str = "Mismatched parentheses"):
        super().__init__(message)


# =============================================================================
# Evaluation
# =============================================================================

class EvalError(EvaluationError):
    """Raised when a postfix sequence cannot be reduced to a single value."""
    pass


class InsufficientOperandsError(EvalError):
    """Raised when an operator is applied with fewer than two pending values."""
    kind = ErrorKind.INSUFFICIENT_OPERANDS

    def __init__(self, operator: str):
        super().__init__(f"Insufficient operands for {operator!r}")
        self.operator = operator


class DivisionByZeroError(EvalError):
    """Raised when attempting to divide by zero."""
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)


class MalformedExpressionError(EvalError):
    """Raised when evaluation ends with other than exactly one value."""
    kind = ErrorKind.MALFORMED_EXPRESSION

    def __init__(self, remaining: int):
        super().__init__(f"Expected exactly one value after evaluation, found {remaining}")
        self.remaining = remaining


class NonFiniteResultError(EvalError):
    """Raised when the result overflows to infinity or is not a number."""
    kind = ErrorKind.NON_FINITE_RESULT

    def __init__(self, value: float):
        super().__init__(f"Result is not a finite number: {value}")
        self.value = value
