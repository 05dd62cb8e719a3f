"""The typed environment registry.

A :class:`Registry` is a fixed, ordered set of :class:`EnvVar` declarations
built once. It exposes per-name read access plus the bulk operations:
eager resolution (:meth:`Registry.init`), the repeatable presence check
(:meth:`Registry.check_all_present`) and publication back into the
environment store (:meth:`Registry.publish` / :meth:`Registry.publish_all`).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from .environ import IEnvironment
from .errors import DuplicateVariable, UnknownVariable
from .logger import get_logger
from .resolver import ResolvedVariable
from .variable import EnvVar

logger = get_logger("registry")


class Registry:
    def __init__(self, variables: Iterable[EnvVar[Any]]) -> None:
        registered: dict[str, EnvVar[Any]] = {}
        for variable in variables:
            if variable.name in registered:
                raise DuplicateVariable(f"Variable `{variable.name}` is declared more than once")
            registered[variable.name] = variable
        self._variables = registered

    @classmethod
    def from_declarations(
        cls,
        declarations: Iterable[tuple[str, Any, Any]],
        *,
        environment: IEnvironment | None = None,
    ) -> Registry:
        """Build a registry from ``(name, type, default)`` triples."""
        return cls(
            EnvVar(name, tp, default, environment=environment)
            for name, tp, default in declarations
        )

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._variables)

    @property
    def variables(self) -> tuple[EnvVar[Any], ...]:
        return tuple(self._variables.values())

    def variable(self, name: str) -> EnvVar[Any]:
        try:
            return self._variables[name]
        except KeyError:
            raise UnknownVariable(name) from None

    def get(self, name: str) -> Any:
        return self.variable(name).get()

    def resolved(self, name: str) -> ResolvedVariable[Any]:
        return self.variable(name).resolved()

    def is_missing(self, name: str) -> bool:
        return self.variable(name).is_missing()

    def init(self) -> None:
        """Resolve every declared variable now, in declaration order."""
        for variable in self._variables.values():
            variable.resolved()
        logger.debug("Initialized env variables", count=len(self._variables))

    def check_all_present(self) -> bool:
        """Warn about every missing variable; True when none is missing.

        Unresolved variables are resolved first so that an unset variable is
        never reported as present; their resolution warning is the warning
        for this call. Repeated calls warn again each time.
        """
        present = True
        for variable in self._variables.values():
            if variable.is_resolved:
                missing = not variable.warn_if_missing()
            else:
                missing = variable.resolved().was_missing
            if missing:
                present = False
        logger.debug("Checked env variables", count=len(self._variables), present=present)
        return present

    def publish(self, name: str) -> str:
        return self.variable(name).publish()

    def publish_all(self) -> None:
        for variable in self._variables.values():
            variable.publish()

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __getattr__(self, name: str) -> Any:
        variables = self.__dict__.get("_variables", {})
        if name in variables:
            return variables[name].get()
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        return f"Registry({', '.join(self._variables)})"


def env_vars_config(
    *, environment: IEnvironment | None = None, **declarations: tuple[Any, Any]
) -> Registry:
    """Declare variables as keyword arguments: ``NAME=(type, default)``.

    >>> config = env_vars_config(WORKERS_COUNT=(int, 32))  # doctest: +SKIP
    >>> config.WORKERS_COUNT  # doctest: +SKIP
    32
    """
    return Registry.from_declarations(
        ((name, tp, default) for name, (tp, default) in declarations.items()),
        environment=environment,
    )


__all__ = ["Registry", "env_vars_config"]
