"""structlog setup shared by the CLI and the API server."""

import logging

import structlog

DEFAULT_LEVEL = "INFO"


def configure_logging(level: str = DEFAULT_LEVEL, json: bool = False) -> None:
    """Configure structlog processors and the minimum log level."""
    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        cache_logger_on_first_use=False,
    )


def configure_default_logging() -> None:
    """Drop DEBUG events for library use unless the host configured structlog."""
    if not structlog.is_configured():
        configure_logging(DEFAULT_LEVEL)
