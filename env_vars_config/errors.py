"""Exception hierarchy for env-vars-config.

Fatal configuration problems derive from :class:`ConfigurationError` and are
never caught inside the package: a malformed override must stop the caller
instead of silently collapsing into the default. A variable that is simply
absent is not an error at all; it is reported through a warning.
"""

from __future__ import annotations


class EnvVarsConfigError(Exception):
    """Base class for every error raised by env-vars-config."""


class ConfigurationError(EnvVarsConfigError):
    """Unrecoverable configuration problem."""


class InvalidVariableType(ConfigurationError, TypeError):
    """Raised when an environment value cannot be parsed as the declared type."""

    def __init__(self, name: str, expected: str, raw: str) -> None:
        self.name = name
        self.expected = expected
        self.raw = raw
        self.actual = type(raw).__name__
        super().__init__(
            f"Invalid value type for the variable `{name}`! "
            f"Expected type `{expected}`, got `{self.actual}`."
        )


class InvalidDefaultValue(ConfigurationError, TypeError):
    """Raised at declaration time when a default cannot become the declared type."""

    def __init__(self, name: str, expected: str, default: object) -> None:
        self.name = name
        self.expected = expected
        self.default = default
        super().__init__(
            f"Default value `{default!r}` for the variable `{name}` is not "
            f"convertible to `{expected}`."
        )


class UnsupportedVariableType(ConfigurationError, TypeError):
    """Raised at declaration time for a type that cannot round-trip through
    the environment, such as an optional one."""

    def __init__(self, name: str, declared: str, reason: str) -> None:
        self.name = name
        self.declared = declared
        super().__init__(f"Variable `{name}` cannot be declared as `{declared}`: {reason}.")


class InvalidVariableName(ConfigurationError, ValueError):
    """Raised when a declared name cannot be used as an environment key."""


class DuplicateVariable(ConfigurationError):
    """Raised when the same name is declared twice in one registry."""


class UnknownVariable(EnvVarsConfigError, KeyError):
    """Raised when a registry is asked about a name it does not declare."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Variable `{self.name}` is not declared"


__all__ = [
    "ConfigurationError",
    "DuplicateVariable",
    "EnvVarsConfigError",
    "InvalidDefaultValue",
    "InvalidVariableName",
    "InvalidVariableType",
    "UnknownVariable",
    "UnsupportedVariableType",
]
