"""
Tokenizer for arithmetic expressions.

Scans the input once, left to right, producing number, operator and
parenthesis tokens. A unary minus is normalized here by emitting a
synthetic ``0`` before it, so ``-5`` becomes ``0 - 5`` and ``(-5)``
becomes ``(0 - 5)``; the parser and evaluator only ever see binary
operators.
"""

import structlog

from calcyard.errors import InvalidCharacterError, MalformedNumberError
from calcyard.tokens import OPERATORS, Token, TokenKind

logger = structlog.get_logger()

DIGITS = "0123456789"


def _starts_operand(previous: Token | None) -> bool:
    """True when a ``-`` following ``previous`` must be unary."""
    if previous is None:
        return True
    return previous.kind in (TokenKind.OPERATOR, TokenKind.LEFT_PAREN)


def _check_number(text: str, position: int) -> None:
    if text.count(".") > 1 or not any(ch in DIGITS for ch in text):
        raise MalformedNumberError(text, position)


def tokenize(text: str) -> list[Token]:
    """
    Split ``text`` into tokens.

    Raises:
        InvalidCharacterError: a character outside ``[0-9.+-*/() ]``.
        MalformedNumberError: a number with no digits or several dots.
    """
    tokens: list[Token] = []
    i = 0
    length = len(text)

    while i < length:
        ch = text[i]

        if ch == " ":
            i += 1
            continue

        if ch in DIGITS or ch == ".":
            start = i
            i += 1
            while i < length and (text[i] in DIGITS or text[i] == "."):
                i += 1
            literal = text[start:i]
            _check_number(literal, start)
            tokens.append(Token.number(literal))
            continue

        if ch in OPERATORS:
            if ch == "-" and _starts_operand(tokens[-1] if tokens else None):
                tokens.append(Token.number("0"))
            tokens.append(Token.operator(ch))
        elif ch == "(":
            tokens.append(Token.left_paren())
        elif ch == ")":
            tokens.append(Token.right_paren())
        else:
            raise InvalidCharacterError(ch, i)
        i += 1

    logger.debug("Tokenized expression", count=len(tokens))
    return tokens
