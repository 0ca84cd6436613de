"""
Payload kinds and value formatting.

Every payload held by a wrapper is a canonical JSON value; its runtime
kind is one of the closed set below.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any


class Kind(str, Enum):
    """Kind of a canonical JSON value."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @classmethod
    def of(cls, value: Any) -> Kind:
        """Return the kind of a canonical value."""
        if value is None:
            return cls.NULL
        # bool first: bool is an int subclass
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, float):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, list):
            return cls.ARRAY
        if isinstance(value, dict):
            return cls.OBJECT
        raise TypeError(f"not a canonical value: {type(value).__name__}")


def format_value(value: Any, max_length: int = 500) -> str:
    """Format a value for a failure message, truncating if too long."""
    if value is None:
        return "null"

    if isinstance(value, str):
        formatted = repr(value)
    elif isinstance(value, (list, dict)):
        try:
            formatted = json.dumps(value, indent=2, ensure_ascii=False)
        except (TypeError, ValueError):
            formatted = repr(value)
    elif isinstance(value, float) and value.is_integer():
        formatted = str(int(value))
    elif isinstance(value, bool):
        formatted = "true" if value else "false"
    else:
        formatted = repr(value)

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted
