"""
Tests for logging defaults.
"""

import pytest
import structlog

from calcyard.editor import ExpressionEditor
from calcyard.engine import evaluate
from calcyard.errors import DivisionByZeroError
from calcyard.log import configure_default_logging, configure_logging


class TestLibraryDefaults:
    """Library use stays silent unless logging is configured."""

    def setup_method(self):
        structlog.reset_defaults()
        configure_default_logging()

    def teardown_method(self):
        configure_logging("INFO")

    def test_evaluate_writes_nothing(self, capsys):
        assert evaluate("1+1") == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_failed_evaluate_writes_nothing(self, capsys):
        with pytest.raises(DivisionByZeroError):
            evaluate("5/0")
        assert capsys.readouterr().out == ""

    def test_editor_preview_writes_nothing(self, capsys):
        editor = ExpressionEditor()
        for ch in "12*3":
            editor.push(ch)
        assert editor.result_text == "36"
        assert capsys.readouterr().out == ""


class TestHostConfiguration:
    """An application's own structlog setup is left alone."""

    def teardown_method(self):
        configure_logging("INFO")

    def test_existing_configuration_kept(self):
        wrapper = structlog.make_filtering_bound_logger(10)
        structlog.configure(wrapper_class=wrapper)
        configure_default_logging()
        assert structlog.get_config()["wrapper_class"] is wrapper

    def test_debug_level_emits(self, capsys):
        configure_logging("DEBUG")
        evaluate("1+1")
        assert "Tokenized expression" in capsys.readouterr().out
