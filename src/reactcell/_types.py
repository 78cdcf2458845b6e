"""Shared type definitions for reactcell."""

from __future__ import annotations

import enum
import numbers
from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")

# Receives (new_value, old_value). old_value is None on an immediate call.
Listener = Callable[[T, T | None], None]


class TypeTag(str, enum.Enum):
    """Closed set of runtime kinds a cell value can have.

    Numbers and booleans are kept apart even though bool subclasses int.
    Everything that is not a scalar, None or a callable is a "table".
    """

    NONE = "none"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    FUNCTION = "function"
    TABLE = "table"

    @classmethod
    def of(cls, value: Any) -> TypeTag:
        if value is None:
            return cls.NONE
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, numbers.Number):
            return cls.NUMBER
        if isinstance(value, (str, bytes)):
            return cls.STRING
        if callable(value):
            return cls.FUNCTION
        return cls.TABLE

    @classmethod
    def coerce(cls, tag: TypeTag | str) -> TypeTag:
        """Accept a TypeTag or its string name ("number", "string", ...)."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            raise ValueError(
                f"unknown type tag {tag!r}; expected one of "
                + ", ".join(t.value for t in cls)
            ) from None
