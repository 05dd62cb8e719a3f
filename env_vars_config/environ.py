"""Environment store used for every read and write made by the registry.

The process environment is both the configuration source and the place where
missing-state sentinels are recorded, so it is treated as a singleton
resource. Nothing else in the package touches ``os.environ`` directly: it goes
through :func:`get_environment`, which makes the backing store swappable
(tests install an :class:`InMemoryEnvironment`).

Every mutation made through the active store is visible to every other
component of the process that reads it.
"""

from __future__ import annotations

import os
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from contextlib import contextmanager


class IEnvironment(ABC):
    @abstractmethod
    def get(self, key: str) -> str | None:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass

    @abstractmethod
    def snapshot(self) -> dict[str, str]:
        pass

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None


class ProcessEnvironment(IEnvironment):
    """The real process environment (``os.environ``)."""

    def get(self, key: str) -> str | None:
        return os.environ.get(key)

    def set(self, key: str, value: str) -> None:
        os.environ[key] = value

    def delete(self, key: str) -> None:
        os.environ.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        return dict(os.environ)


class InMemoryEnvironment(IEnvironment):
    """A dict-backed environment for tests and sandboxed registries."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._vars: dict[str, str] = dict(initial) if initial else {}
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._vars.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._vars[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._vars.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        with self._lock:
            return dict(self._vars)

    def __len__(self) -> int:
        with self._lock:
            return len(self._vars)


_current: IEnvironment = ProcessEnvironment()
_swap_lock = threading.Lock()


def get_environment(environment: IEnvironment | None = None) -> IEnvironment:
    """Return ``environment`` when given, else the active process-wide store."""
    if environment is not None:
        return environment
    return _current


def set_environment(environment: IEnvironment) -> IEnvironment:
    """Install ``environment`` as the active store and return the previous one."""
    global _current
    with _swap_lock:
        previous = _current
        _current = environment
    return previous


@contextmanager
def use_environment(environment: IEnvironment) -> Iterator[IEnvironment]:
    """Temporarily install ``environment`` as the active store."""
    previous = set_environment(environment)
    try:
        yield environment
    finally:
        set_environment(previous)


__all__ = [
    "IEnvironment",
    "InMemoryEnvironment",
    "ProcessEnvironment",
    "get_environment",
    "set_environment",
    "use_environment",
]
