"""Structured logging for pomkit."""

from __future__ import annotations

import logging

import structlog

from pomkit.config import get_config


def configure_logging(
    level: str | None = None, json_logs: bool | None = None
) -> None:
    """Configure structlog output for pomkit events.

    Opt-in: importing pomkit never touches structlog's global setup.

    Defaults come from ``PomkitConfig`` (``POMKIT_LOG_LEVEL`` and
    ``POMKIT_JSON_LOGS``).
    """
    config = get_config()
    level = (level or config.log_level).upper()
    json_logs = config.json_logs if json_logs is None else json_logs

    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Return a lazy logger that tags events with the module name.

    The logger picks up the structlog configuration when it logs, not when
    it is created, so module-level loggers follow ``configure_logging()``
    calls made after import.
    """
    return structlog.get_logger(logger_name=name)
