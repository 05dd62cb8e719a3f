"""Missing-state tracking.

A resolved value cannot tell "explicitly set to the default" apart from
"unset, default applied", so every fallback is recorded as a sentinel entry
(``_<NAME>_WAS_MISSING=true``) in the environment store. Later queries read
the sentinel instead of re-parsing. A sentinel that is absent means present.
"""

from __future__ import annotations

from typing import Any

from .environ import IEnvironment, get_environment
from .logger import get_logger
from .settings import get_sentinel_settings

logger = get_logger("tracker")

SENTINEL_TRUE = "true"


def sentinel_name(name: str) -> str:
    """Return the environment key recording whether ``name`` was missing."""
    settings = get_sentinel_settings()
    return f"{settings.sentinel_prefix}{name}{settings.sentinel_suffix}"


def is_missing(name: str, environment: IEnvironment | None = None) -> bool:
    env = get_environment(environment)
    return env.get(sentinel_name(name)) == SENTINEL_TRUE


def mark_missing(name: str, environment: IEnvironment | None = None) -> None:
    env = get_environment(environment)
    env.set(sentinel_name(name), SENTINEL_TRUE)


def warn_missing(name: str, default: Any) -> None:
    logger.warning(
        "Variable is missing in the env, using default value",
        variable=name,
        default=str(default),
    )


def warn_if_missing(name: str, default: Any, environment: IEnvironment | None = None) -> bool:
    """Warn when ``name`` is recorded as missing.

    Returns True when the variable is genuinely present. Unlike the one-shot
    warning emitted on first resolution, this warns on every call.
    """
    if is_missing(name, environment):
        warn_missing(name, default)
        return False
    return True


__all__ = [
    "SENTINEL_TRUE",
    "is_missing",
    "mark_missing",
    "sentinel_name",
    "warn_if_missing",
    "warn_missing",
]
