"""Class-body declaration surface.

Annotated class attributes become environment variables::

    class AppConfig(EnvConfig):
        SERVER_ADDRESS: str = "0.0.0.0:8080"
        WORKERS_COUNT: int = 32

    AppConfig.WORKERS_COUNT      # resolved lazily on first read
    AppConfig.init()             # resolve everything now
    AppConfig.publish_all()      # mirror values into the environment

The declaration list is fixed when the class body is executed. Subclasses
inherit their parents' variables and may redeclare them.
"""

from __future__ import annotations

import inspect
from typing import Any, ClassVar, get_origin

from .environ import IEnvironment
from .errors import ConfigurationError
from .registry import Registry
from .resolver import ResolvedVariable
from .variable import EnvVar


class _EnvConfigMeta(type):
    def __setattr__(cls, name: str, value: Any) -> None:
        registry = cls.__dict__.get("__registry__")
        if registry is not None and name in registry:
            raise AttributeError(f"Variable `{name}` of {cls.__name__} is read-only")
        super().__setattr__(name, value)


class EnvConfig(metaclass=_EnvConfigMeta):
    """Base class for declarative environment registries.

    Class keyword ``environment=`` binds every variable to an explicit store
    instead of the process-wide one.
    """

    __registry__: ClassVar[Registry] = Registry(())

    def __init_subclass__(cls, *, environment: IEnvironment | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        declared: dict[str, EnvVar[Any]] = {}
        for base in reversed(cls.__mro__[1:]):
            parent = base.__dict__.get("__registry__")
            if parent is not None:
                declared.update((variable.name, variable) for variable in parent.variables)

        for name, tp in inspect.get_annotations(cls, eval_str=True).items():
            if get_origin(tp) is ClassVar or tp is ClassVar:
                continue
            if name not in cls.__dict__:
                raise ConfigurationError(f"Variable `{name}` of {cls.__name__} has no default value")
            declared[name] = EnvVar(name, tp, cls.__dict__[name], environment=environment)
            type.__setattr__(cls, name, declared[name])

        type.__setattr__(cls, "__registry__", Registry(declared.values()))

    def __new__(cls, *args: Any, **kwargs: Any) -> EnvConfig:
        raise TypeError(f"{cls.__name__} is a declaration namespace and cannot be instantiated")

    @classmethod
    def registry(cls) -> Registry:
        return cls.__registry__

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return cls.__registry__.names

    @classmethod
    def variable(cls, name: str) -> EnvVar[Any]:
        return cls.__registry__.variable(name)

    @classmethod
    def resolved(cls, name: str) -> ResolvedVariable[Any]:
        return cls.__registry__.resolved(name)

    @classmethod
    def is_missing(cls, name: str) -> bool:
        return cls.__registry__.is_missing(name)

    @classmethod
    def init(cls) -> None:
        cls.__registry__.init()

    @classmethod
    def check_all_present(cls) -> bool:
        return cls.__registry__.check_all_present()

    @classmethod
    def publish(cls, name: str) -> str:
        return cls.__registry__.publish(name)

    @classmethod
    def publish_all(cls) -> None:
        cls.__registry__.publish_all()


__all__ = ["EnvConfig"]
