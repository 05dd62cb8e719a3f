"""Structured logging configuration for env-vars-config."""

from __future__ import annotations

import logging

import structlog

from .settings import get_logging_settings


def configure_logging(
    *, level: int | str | None = None, fmt: str | None = None
) -> structlog.stdlib.BoundLogger:
    """Configure structlog over stdlib logging and return the library logger.

    ``level`` and ``fmt`` default to ``ENV_VARS_CONFIG_LOG_LEVEL`` and
    ``ENV_VARS_CONFIG_LOG_FORMAT``.
    """

    settings = get_logging_settings()
    level = settings.log_level if level is None else level
    fmt = settings.log_format if fmt is None else fmt
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        cache_logger_on_first_use=True,
    )
    return get_logger("env_vars_config")


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a logger without mutating global configuration."""

    return structlog.get_logger(component=component)


__all__ = ["configure_logging", "get_logger"]
