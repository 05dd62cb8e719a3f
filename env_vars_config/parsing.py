"""Parsing and canonical formatting of typed environment values.

Each declared type is wrapped in a :class:`ValueParser` backed by a pydantic
``TypeAdapter`` in lax mode. Scalars are validated straight from the
environment string (``"32"`` → ``32``, ``"false"`` → ``False``); structured
types (lists, dicts, tuples, sets, pydantic models) are read as JSON text.

:meth:`ValueParser.format` produces the string written back by the
environment writer, chosen so that parsing it yields the same value.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Generic, TypeVar, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError

T = TypeVar("T")

_STRUCTURED = (list, dict, tuple, set, frozenset)


def type_name(tp: Any) -> str:
    """Short, human readable name of ``tp`` used in diagnostics."""
    if get_origin(tp) is not None:
        return repr(tp).replace("typing.", "")
    return getattr(tp, "__name__", repr(tp))


def is_structured(tp: Any) -> bool:
    origin = get_origin(tp) or tp
    if not isinstance(origin, type):
        return False
    return issubclass(origin, BaseModel) or issubclass(origin, _STRUCTURED)


class ValueParser(Generic[T]):
    """Parse, convert and format values of one declared type."""

    def __init__(self, tp: type[T]) -> None:
        self.type = tp
        self.type_name = type_name(tp)
        self.structured = is_structured(tp)
        self._adapter: TypeAdapter[T] = TypeAdapter(tp)

    @property
    def admits_none(self) -> bool:
        """True for optional types; ``None`` has no environment string."""
        try:
            self._adapter.validate_python(None)
        except ValidationError:
            return False
        return True

    def parse(self, text: str) -> T:
        """Parse an environment string; raises ``pydantic.ValidationError``."""
        if self.structured:
            return self._adapter.validate_json(text)
        return self._adapter.validate_python(text)

    def convert(self, value: Any) -> T:
        """Turn a declared default into the declared type."""
        if isinstance(value, str):
            return self.parse(value)
        return self._adapter.validate_python(value)

    def format(self, value: T) -> str:
        dumped = self._adapter.dump_python(value, mode="json")
        if isinstance(dumped, bool):
            return "true" if dumped else "false"
        if self.structured or isinstance(dumped, (dict, list)):
            return json.dumps(dumped, separators=(",", ":"))
        return str(dumped)

    def __repr__(self) -> str:
        return f"ValueParser({self.type_name})"


@lru_cache(maxsize=None)
def parser_for(tp: Any) -> ValueParser[Any]:
    """Return the shared parser for ``tp``."""
    return ValueParser(tp)


__all__ = ["ValueParser", "is_structured", "parser_for", "type_name"]
