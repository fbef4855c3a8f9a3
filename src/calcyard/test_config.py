"""
Tests for configuration loading.
"""

import pytest
from pydantic import ValidationError

from calcyard.config import Settings, apply_overrides, load_yaml_config, settings


class TestSettings:
    """Test settings sources."""

    def test_defaults(self):
        assert Settings().result_precision == 12

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("CALCYARD_RESULT_PRECISION", "4")
        assert Settings().result_precision == 4

    def test_log_level_case_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="bogus")

    def test_invalid_log_level_override(self):
        with pytest.raises(ValidationError):
            apply_overrides({"log_level": "bogus"})
        assert settings.log_level == "INFO"

    def test_missing_yaml(self, tmp_path):
        assert load_yaml_config(tmp_path / "missing.yaml") == {}

    def test_yaml(self, tmp_path):
        path = tmp_path / "calcyard.yaml"
        path.write_text("log_level: DEBUG\nerror_placeholder: ERR\n")
        assert load_yaml_config(path) == {"log_level": "DEBUG", "error_placeholder": "ERR"}


class TestOverrides:
    """Test applying overrides to the global settings."""

    def teardown_method(self):
        apply_overrides({"error_placeholder": "Error"})

    def test_apply(self):
        apply_overrides({"error_placeholder": "ERR"})
        assert settings.error_placeholder == "ERR"
