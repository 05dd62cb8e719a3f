"""A declared variable and its lazily resolved, memoized value."""

from __future__ import annotations

import threading
from typing import Any, Generic, TypeVar

from . import tracker
from .environ import IEnvironment, get_environment
from .errors import InvalidVariableName
from .logger import get_logger
from .parsing import ValueParser
from .resolver import ResolvedVariable, convert_default, declared_parser, resolve_variable

T = TypeVar("T")

logger = get_logger("variable")

_FORBIDDEN_IN_NAME = ("=", "\0")


def validate_name(name: str) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidVariableName(f"Variable name must be a non-empty string, got {name!r}")
    if any(ch in name for ch in _FORBIDDEN_IN_NAME):
        raise InvalidVariableName(f"Variable name {name!r} is not a valid environment key")
    return name


class EnvVar(Generic[T]):
    """One ``(name, type, default)`` declaration with a once-initialized slot.

    The default is converted when the declaration is built, so an
    incompatible default fails immediately rather than on first read.

    The first call to :meth:`resolved` reads the environment store; every
    later call returns the same :class:`ResolvedVariable` without touching
    the store again. Concurrent first readers block on a per-variable lock
    and all receive the winner's result. Publishing takes the same lock, so
    writes for one name never interleave.

    Used as a class attribute of an :class:`~env_vars_config.config.EnvConfig`
    it acts as a descriptor returning the resolved value.
    """

    def __init__(
        self,
        name: str,
        tp: type[T],
        default: Any,
        *,
        environment: IEnvironment | None = None,
    ) -> None:
        self.name = validate_name(name)
        self.type = tp
        self.parser: ValueParser[T] = declared_parser(name, tp)
        self.default: T = convert_default(name, self.parser, default)
        self.environment = environment
        self._lock = threading.Lock()
        self._resolved: ResolvedVariable[T] | None = None

    @property
    def type_name(self) -> str:
        return self.parser.type_name

    @property
    def is_resolved(self) -> bool:
        return self._resolved is not None

    def resolved(self) -> ResolvedVariable[T]:
        resolved = self._resolved
        if resolved is not None:
            return resolved
        with self._lock:
            if self._resolved is None:
                self._resolved = resolve_variable(
                    self.name, self.parser, self.default, self.environment
                )
            return self._resolved

    def get(self) -> T:
        return self.resolved().value

    @property
    def value(self) -> T:
        return self.get()

    @property
    def was_missing(self) -> bool:
        """Whether the memoized resolution fell back to the default."""
        return self.resolved().was_missing

    def is_missing(self) -> bool:
        """Read the missing-state sentinel (does not force resolution)."""
        return tracker.is_missing(self.name, self.environment)

    def warn_if_missing(self) -> bool:
        return tracker.warn_if_missing(
            self.name, self.parser.format(self.default), self.environment
        )

    def publish(self) -> str:
        """Write the resolved value's canonical string under :attr:`name`.

        Forces resolution if it has not happened yet. Returns the string written.
        """
        text = self.parser.format(self.get())
        with self._lock:
            get_environment(self.environment).set(self.name, text)
        logger.debug("Published variable to env", variable=self.name, value=text)
        return text

    def __get__(self, instance: object, owner: type | None = None) -> T:
        return self.get()

    def __repr__(self) -> str:
        state = "resolved" if self.is_resolved else "unresolved"
        return f"EnvVar({self.name!r}, {self.type_name}, default={self.default!r}, {state})"


def publish_only(*variables: EnvVar[Any]) -> None:
    """Publish the given variables, and only those."""
    for variable in variables:
        variable.publish()


__all__ = ["EnvVar", "publish_only", "validate_name"]
