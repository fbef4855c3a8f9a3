"""Shunting-yard conversion of infix tokens to postfix (RPN) order."""

import structlog

from calcyard.errors import MismatchedParensError
from calcyard.tokens import Token, TokenKind

logger = structlog.get_logger()


def to_postfix(tokens: list[Token]) -> list[Token]:
    """
    Reorder infix ``tokens`` into postfix order.

    An incoming operator pops every stacked operator of greater or equal
    precedence first, which makes all four operators left-associative.

    Raises:
        MismatchedParensError: a ``)`` without an open ``(``, or a ``(``
            left open at the end of input.
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            output.append(token)
        elif token.kind is TokenKind.OPERATOR:
            while stack and stack[-1].is_operator and token.precedence <= stack[-1].precedence:
                output.append(stack.pop())
            stack.append(token)
        elif token.kind is TokenKind.LEFT_PAREN:
            stack.append(token)
        elif token.kind is TokenKind.RIGHT_PAREN:
            while stack and stack[-1].kind is not TokenKind.LEFT_PAREN:
                output.append(stack.pop())
            if not stack:
                raise MismatchedParensError("Unmatched ')'")
            stack.pop()

    while stack:
        token = stack.pop()
        if token.is_paren:
            raise MismatchedParensError("Unmatched '('")
        output.append(token)

    logger.debug("Converted to postfix", count=len(output))
    return output
