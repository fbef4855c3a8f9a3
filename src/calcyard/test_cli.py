"""
Tests for the command-line interface.
"""

from typer.testing import CliRunner

from calcyard.cli import app
from calcyard.config import apply_overrides

runner = CliRunner()


class TestEval:
    """Test the eval command."""

    def test_eval(self):
        result = runner.invoke(app, ["eval", "2+3*4"])
        assert result.exit_code == 0
        assert "14" in result.output

    def test_eval_failure(self):
        result = runner.invoke(app, ["eval", "5/0"])
        assert result.exit_code == 1
        assert "division_by_zero" in result.output


class TestRpn:
    """Test the rpn command."""

    def test_postfix_shown(self):
        result = runner.invoke(app, ["rpn", "2+3*4"])
        assert result.exit_code == 0
        assert "2 3 4 * +" in result.output


class TestRepl:
    """Test the interactive session."""

    def test_chaining(self):
        result = runner.invoke(app, ["repl"], input="1+2\n*3\nquit\n")
        assert result.exit_code == 0
        assert "= 3" in result.output
        assert "= 9" in result.output

    def test_error_then_recover(self):
        result = runner.invoke(app, ["repl"], input="(1\n2*2\n")
        assert result.exit_code == 0
        assert "mismatched_parens" in result.output
        assert "= 4" in result.output

    def test_failed_line_is_not_continued(self):
        result = runner.invoke(app, ["repl"], input="5/0\n-1\n")
        assert result.exit_code == 0
        assert result.output.count("division_by_zero") == 1
        assert "= -1" in result.output


class TestConfigOption:
    """Test loading settings from YAML."""

    def teardown_method(self):
        apply_overrides({"result_precision": 12, "log_level": "INFO"})

    def test_yaml_precision(self, tmp_path):
        config = tmp_path / "calcyard.yaml"
        config.write_text("result_precision: 2\n")
        result = runner.invoke(app, ["--config", str(config), "eval", "1/3"])
        assert result.exit_code == 0
        assert "0.33" in result.output
        assert "0.333" not in result.output

    def test_invalid_log_level(self):
        result = runner.invoke(app, ["--log-level", "bogus", "eval", "1+1"])
        assert result.exit_code == 2
        assert not isinstance(result.exception, KeyError)
        assert "log_level" in result.output

    def test_log_level_case_insensitive(self):
        result = runner.invoke(app, ["--log-level", "warning", "eval", "1+1"])
        assert result.exit_code == 0
        assert "2" in result.output
