"""
Tests for shunting-yard postfix conversion.
"""

import pytest

from calcyard.errors import MismatchedParensError, ParseError
from calcyard.parser import to_postfix
from calcyard.tokenizer import tokenize
from calcyard.tokens import TokenKind, render


def postfix(expression):
    return render(to_postfix(tokenize(expression)))


class TestPrecedence:
    """Test operator precedence."""

    def test_multiplication_binds_tighter(self):
        assert postfix("2+3*4") == "2 3 4 * +"

    def test_multiplication_first(self):
        assert postfix("2*3+4") == "2 3 * 4 +"

    def test_parentheses_override(self):
        assert postfix("(2+3)*4") == "2 3 + 4 *"

    def test_nested_parentheses(self):
        assert postfix("((1+2)*(3-4))/5") == "1 2 + 3 4 - * 5 /"

    def test_unary_minus(self):
        assert postfix("-5+3") == "0 5 - 3 +"


class TestAssociativity:
    """Equal precedence operators are applied left to right."""

    def test_subtraction(self):
        assert postfix("8-3-2") == "8 3 - 2 -"

    def test_division(self):
        assert postfix("8/4/2") == "8 4 / 2 /"

    def test_mixed_same_level(self):
        assert postfix("6/3*2") == "6 3 / 2 *"


class TestParentheses:
    """Test parenthesis matching."""

    def test_no_parentheses_in_output(self):
        tokens = to_postfix(tokenize("(1+(2*3))"))
        assert all(t.kind in (TokenKind.NUMBER, TokenKind.OPERATOR) for t in tokens)

    def test_unclosed_paren(self):
        with pytest.raises(MismatchedParensError):
            postfix("(1+2")

    def test_unopened_paren(self):
        with pytest.raises(MismatchedParensError):
            postfix("1+2)")

    def test_reversed_parens(self):
        with pytest.raises(ParseError):
            postfix(")(")

    def test_empty_parens(self):
        assert postfix("()") == ""
