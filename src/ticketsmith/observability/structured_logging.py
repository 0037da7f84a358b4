"""
Structured Logging Setup

Configures structlog for the command-line tools. Log lines always go to
stderr; stdout is reserved for generated output.
"""

import logging
import sys

import structlog

from ticketsmith.config import settings

_initialized = False


def _stderr_logger_factory(*args) -> structlog.PrintLogger:
    """Resolve sys.stderr per logger so redirected streams are honoured."""
    return structlog.PrintLogger(file=sys.stderr)


def setup_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """
    Configure structlog once per process.

    This sets up:
    - Level filtering from settings.log_level
    - ISO timestamps and log level on every event
    - Console or JSON rendering to stderr
    """
    global _initialized

    if _initialized:
        structlog.get_logger(__name__).debug("Logging already initialized")
        return

    level_name = (level or settings.log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    use_json = settings.log_json if json_logs is None else json_logs
    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )

    _initialized = True
    structlog.get_logger(__name__).debug(
        "Logging configured", level=level_name, json=use_json
    )


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a structlog logger."""
    return structlog.get_logger(name)
