"""
Expression editor: the input adapter in front of the evaluator.

Holds the expression being typed as explicit state and applies the
editing actions of a pocket calculator (append, clear, backspace,
percent, evaluate) to it. The evaluator itself stays pure; the editor
only ever hands it the current string.
"""

import re

import structlog

from calcyard.config import settings
from calcyard.engine import evaluate
from calcyard.errors import EvaluationError
from calcyard.formatting import format_result
from calcyard.models import EditorState
from calcyard.tokens import OPERATORS

logger = structlog.get_logger()

TRAILING_NUMBER = re.compile(r"[0-9]*\.?[0-9]*$")
TRAILING_PERCENT_OPERAND = re.compile(r"[0-9]*\.?[0-9]+$")

APPENDABLE = set("0123456789()")
KEY_CHARACTERS = set("0123456789.+-*/()")


class ExpressionEditor:
    """Mutable expression state with calculator-style editing actions."""

    def __init__(
        self,
        expression: str = "",
        preview_placeholder: str | None = None,
        error_placeholder: str | None = None,
    ):
        self.expression = expression
        self.preview_placeholder = (
            settings.preview_placeholder if preview_placeholder is None else preview_placeholder
        )
        self.error_placeholder = (
            settings.error_placeholder if error_placeholder is None else error_placeholder
        )
        self.result_text = ""
        self.preview()

    @property
    def display(self) -> str:
        return self.expression or "0"

    def _ends_with_operator(self) -> bool:
        return bool(self.expression) and self.expression[-1] in OPERATORS

    # -------------------------------------------------------------------------
    # Editing actions
    # -------------------------------------------------------------------------

    def push(self, value: str) -> None:
        """Append a digit, dot, operator or parenthesis with basic validation."""
        if value == ".":
            self._push_dot()
        elif value in OPERATORS:
            self._push_operator(value)
        elif value in APPENDABLE:
            self.expression += value
        else:
            raise ValueError(f"Cannot append {value!r} to an expression")
        self.preview()

    def _push_dot(self) -> None:
        last_number = TRAILING_NUMBER.search(self.expression).group(0)
        if "." in last_number:
            return
        if last_number == "":
            self.expression += "0"
        self.expression += "."

    def _push_operator(self, op: str) -> None:
        if not self.expression:
            # Only a leading minus may start an expression
            if op == "-":
                self.expression = "-"
            return
        if self._ends_with_operator():
            self.expression = self.expression[:-1] + op
            return
        self.expression += op

    def clear(self) -> None:
        self.expression = ""
        self.preview()

    def backspace(self) -> None:
        self.expression = self.expression[:-1]
        self.preview()

    def percent(self) -> None:
        """Replace the trailing number ``n`` with ``n / 100``."""
        match = TRAILING_PERCENT_OPERAND.search(self.expression)
        if not match:
            return
        number = match.group(0)
        replaced = format_result(float(number) / 100)
        self.expression = self.expression[: match.start()] + replaced
        self.preview()

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def preview(self) -> str:
        """Refresh and return the live result text for the current expression."""
        if not self.expression or self._ends_with_operator():
            self.result_text = self.preview_placeholder
            return self.result_text

        try:
            self.result_text = format_result(evaluate(self.expression))
        except EvaluationError:
            self.result_text = self.error_placeholder
        return self.result_text

    def calculate(self) -> float | None:
        """
        Evaluate the expression and replace it with the result text.

        The expression is kept unchanged on failure so it can be edited;
        the error is re-raised after the result text is set to the error
        placeholder.
        """
        if not self.expression:
            return None

        try:
            value = evaluate(self.expression)
        except EvaluationError:
            self.result_text = self.error_placeholder
            raise

        self.expression = format_result(value)
        self.preview()
        return value

    # -------------------------------------------------------------------------
    # Keyboard adapter
    # -------------------------------------------------------------------------

    def handle_key(self, key: str) -> bool:
        """Apply a keyboard key. Returns False for keys that are ignored."""
        if key in ("Enter", "="):
            try:
                self.calculate()
            except EvaluationError as e:
                logger.info("Calculation rejected", expression=self.expression, kind=e.kind.value)
            return True
        if key == "Backspace":
            self.backspace()
            return True
        if key == "Escape":
            self.clear()
            return True
        if key == "%":
            self.percent()
            return True
        if key in KEY_CHARACTERS:
            self.push(key)
            return True
        return False

    def snapshot(self) -> EditorState:
        return EditorState(
            expression=self.expression,
            display=self.display,
            result_text=self.result_text,
        )
