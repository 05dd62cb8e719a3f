"""
env-vars-config - typed, lazily resolved configuration from environment variables.

Declare ``(name, type, default)`` triples once; each value is read from the
environment on first access, parsed against its type, and memoized for the
life of the process. Unset variables fall back to their default, log a
warning and are recorded as missing with a ``_<NAME>_WAS_MISSING`` sentinel.
A value that is set but does not parse raises :class:`InvalidVariableType`.

Usage:
    >>> from env_vars_config import EnvConfig, SocketAddress
    >>> class AppConfig(EnvConfig):
    ...     SERVER_ADDRESS: SocketAddress = "0.0.0.0:8080"
    ...     WORKERS_COUNT: int = 32
    >>> AppConfig.WORKERS_COUNT  # doctest: +SKIP
    32
    >>> AppConfig.publish("WORKERS_COUNT")  # doctest: +SKIP
    '32'

Modules:
    config      EnvConfig class-body declarations
    registry    Registry and the env_vars_config() builder
    variable    EnvVar lazy slot and publishing
    resolver    resolution from the environment store
    tracker     missing-state sentinels
    environ     swappable environment store
    parsing     pydantic-backed parsing and canonical formatting
    settings    library settings (pydantic-settings)
    logger      structlog configuration
"""

from .config import EnvConfig
from .environ import (
    IEnvironment,
    InMemoryEnvironment,
    ProcessEnvironment,
    get_environment,
    set_environment,
    use_environment,
)
from .errors import (
    ConfigurationError,
    DuplicateVariable,
    EnvVarsConfigError,
    InvalidDefaultValue,
    InvalidVariableName,
    InvalidVariableType,
    UnknownVariable,
    UnsupportedVariableType,
)
from .net import SocketAddress
from .registry import Registry, env_vars_config
from .resolver import ResolvedVariable, resolve
from .variable import EnvVar, publish_only

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DuplicateVariable",
    "EnvConfig",
    "EnvVar",
    "EnvVarsConfigError",
    "IEnvironment",
    "InMemoryEnvironment",
    "InvalidDefaultValue",
    "InvalidVariableName",
    "InvalidVariableType",
    "ProcessEnvironment",
    "Registry",
    "ResolvedVariable",
    "SocketAddress",
    "UnknownVariable",
    "UnsupportedVariableType",
    "__version__",
    "env_vars_config",
    "get_environment",
    "publish_only",
    "resolve",
    "set_environment",
    "use_environment",
]
