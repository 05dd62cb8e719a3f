"""Settings for env-vars-config itself.

These knobs configure the library (log output, sentinel naming), not the
application variables it resolves. They are read with ``pydantic-settings``
from ``ENV_VARS_CONFIG_``-prefixed environment variables.

Sentinel naming and logging are separate settings classes so that a bad
logging value can only break :func:`env_vars_config.logger.configure_logging`,
never resolution.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvVarsConfigBaseSettings(BaseSettings):
    """Base class picking up the ``ENV_VARS_CONFIG_`` prefix."""

    model_config = SettingsConfigDict(env_prefix="ENV_VARS_CONFIG_", extra="ignore")


class SentinelSettings(EnvVarsConfigBaseSettings):
    """``ENV_VARS_CONFIG_SENTINEL_PREFIX`` / ``_SUFFIX`` build the missing-state
    key, ``_<NAME>_WAS_MISSING`` by default."""

    sentinel_prefix: str = Field(default="_", description="Prefix of missing-state keys")
    sentinel_suffix: str = Field(
        default="_WAS_MISSING", description="Suffix of missing-state keys"
    )


class LoggingSettings(EnvVarsConfigBaseSettings):
    """``ENV_VARS_CONFIG_LOG_LEVEL`` / ``_LOG_FORMAT`` control the structlog
    output installed by :func:`env_vars_config.logger.configure_logging`."""

    log_level: str = Field(default="INFO", description="Logging level for library events")
    log_format: Literal["json", "console"] = Field(
        default="console", description="structlog renderer used by configure_logging"
    )


def load_sentinel_settings(*, overrides: dict[str, Any] | None = None) -> SentinelSettings:
    """Construct :class:`SentinelSettings`.

    Precedence (highest first):
    1. ``overrides`` dict passed explicitly.
    2. ``ENV_VARS_CONFIG_*`` environment variables.
    3. Field defaults.
    """

    return SentinelSettings(**(overrides or {}))


def load_logging_settings(*, overrides: dict[str, Any] | None = None) -> LoggingSettings:
    """Construct :class:`LoggingSettings` with the same precedence."""

    return LoggingSettings(**(overrides or {}))


@lru_cache(maxsize=1)
def get_sentinel_settings() -> SentinelSettings:
    return load_sentinel_settings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    return load_logging_settings()


__all__ = [
    "EnvVarsConfigBaseSettings",
    "LoggingSettings",
    "SentinelSettings",
    "get_logging_settings",
    "get_sentinel_settings",
    "load_logging_settings",
    "load_sentinel_settings",
]
