"""Lexical token types shared by the tokenizer, parser and evaluator."""

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


OPERATORS = ("+", "-", "*", "/")

# Binding strength; equal precedence pops, so every operator is left-associative
PRECEDENCE = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}


@dataclass(frozen=True)
class Token:
    """A single lexical token. ``text`` is the source text of the token."""
    kind: TokenKind
    text: str

    @classmethod
    def number(cls, text: str) -> "Token":
        return cls(TokenKind.NUMBER, text)

    @classmethod
    def operator(cls, symbol: str) -> "Token":
        if symbol not in PRECEDENCE:
            raise ValueError(f"Unknown operator: {symbol}")
        return cls(TokenKind.OPERATOR, symbol)

    @classmethod
    def left_paren(cls) -> "Token":
        return cls(TokenKind.LEFT_PAREN, "(")

    @classmethod
    def right_paren(cls) -> "Token":
        return cls(TokenKind.RIGHT_PAREN, ")")

    @property
    def is_operator(self) -> bool:
        return self.kind is TokenKind.OPERATOR

    @property
    def is_paren(self) -> bool:
        return self.kind in (TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN)

    @property
    def precedence(self) -> int:
        return PRECEDENCE.get(self.text, 0) if self.is_operator else 0

    def __str__(self) -> str:
        return self.text


def render(tokens: list[Token]) -> str:
    """Join tokens with single spaces, e.g. ``2 3 4 * +``."""
    return " ".join(token.text for token in tokens)
