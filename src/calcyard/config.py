"""
Configuration management for calcyard.

Handles loading configuration from environment variables, ``.env`` and
YAML files, and provides sensible defaults for all settings.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CALCYARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    app_name: str = "calcyard"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_json: bool = False

    # Evaluation settings
    result_precision: int = Field(12, ge=0, le=15)  # Decimal places kept for non-integral results

    # Display settings
    preview_placeholder: str = "…"  # Shown while the expression ends in an operator
    error_placeholder: str = "Error"

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


# Global settings instance
settings = Settings()


def load_yaml_config(path: Path) -> dict[str, Any]:
    """Load configuration from a YAML file."""
    import yaml

    if not path.exists():
        return {}

    with open(path) as f:
        return yaml.safe_load(f) or {}


def apply_overrides(overrides: dict[str, Any]) -> Settings:
    """Validate ``overrides`` and apply them to the global settings in place."""
    merged = Settings.model_validate({**settings.model_dump(), **overrides})
    for name in Settings.model_fields:
        setattr(settings, name, getattr(merged, name))
    return settings
