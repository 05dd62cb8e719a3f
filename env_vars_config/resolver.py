"""Resolution of one declared variable from the environment store.

Resolution is not a pure function: a fallback to the default writes the
missing-state sentinel into the shared store. Memoization lives one level up,
in :class:`env_vars_config.variable.EnvVar`; the functions here do the work
every time they are called.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from . import tracker
from .environ import IEnvironment, get_environment
from .errors import InvalidDefaultValue, InvalidVariableType, UnsupportedVariableType
from .logger import get_logger
from .parsing import ValueParser, parser_for

T = TypeVar("T")

logger = get_logger("resolver")


@dataclass(frozen=True)
class ResolvedVariable(Generic[T]):
    value: T
    was_missing: bool


def resolve_variable(
    name: str,
    parser: ValueParser[T],
    default: T,
    environment: IEnvironment | None = None,
) -> ResolvedVariable[T]:
    """Resolve ``name`` against ``parser``, falling back to ``default``.

    ``default`` must already be of the declared type.

    Raises:
        InvalidVariableType: the variable is set but does not parse. The
            default is never substituted for a malformed value.
    """
    env = get_environment(environment)
    raw = env.get(name)
    if raw is None:
        tracker.mark_missing(name, env)
        tracker.warn_missing(name, parser.format(default))
        return ResolvedVariable(default, True)

    try:
        value = parser.parse(raw)
    except ValidationError as exc:
        raise InvalidVariableType(name, parser.type_name, raw) from exc

    # Last write wins: a sentinel left by an earlier fallback still counts.
    was_missing = tracker.is_missing(name, env)
    if was_missing:
        tracker.warn_missing(name, parser.format(default))
    logger.debug("Resolved variable from env", variable=name, type=parser.type_name)
    return ResolvedVariable(value, was_missing)


def declared_parser(name: str, tp: Any) -> ValueParser[Any]:
    """Return the parser for a declared type, rejecting types that admit None."""
    parser = parser_for(tp)
    if parser.admits_none:
        raise UnsupportedVariableType(
            name, parser.type_name, "None has no environment representation"
        )
    return parser


def convert_default(name: str, parser: ValueParser[T], default: Any) -> T:
    """Convert a declared default, raising :class:`InvalidDefaultValue` on failure."""
    try:
        return parser.convert(default)
    except (ValueError, TypeError) as exc:
        raise InvalidDefaultValue(name, parser.type_name, default) from exc


def resolve(name: str, tp: type[T], default: Any, environment: IEnvironment | None = None) -> T:
    """Resolve ``name`` as ``tp`` and return only the value (no memoization)."""
    parser = declared_parser(name, tp)
    return resolve_variable(name, parser, convert_default(name, parser, default), environment).value


__all__ = [
    "ResolvedVariable",
    "convert_default",
    "declared_parser",
    "resolve",
    "resolve_variable",
]
