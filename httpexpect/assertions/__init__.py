"""
Chained assertions over JSON-shaped values

This package provides the typed wrappers used to inspect decoded
response payloads, the chain that tracks failure state along an
assertion expression, and the canonicalization rules used for equality.

Wrappers:
    - Value: any JSON value, narrowed with object()/array()/string()/...
    - Object: dict with string keys
    - Array: list
    - String, Number, Boolean, Null: scalars

Failure handling:
    When a check fails, the failure is reported and the wrapper's chain
    is marked as failed. All subsequent checks on that wrapper, and on
    any wrapper obtained from it afterwards, are ignored.

Usage:
    from httpexpect.assertions import Array
    from httpexpect.reporting import AssertReporter

    reporter = AssertReporter()
    array = Array(reporter, ["foo", 123])

    e0 = array.element(0)   # success
    e1 = array.element(1)   # success

    s0 = e0.string()        # success
    s1 = e1.string()        # failure; e1 and s1 are marked as failed

    s0.equal("foo")         # success
    s1.equal("bar")         # ignored, s1 is already failed
"""

# Chain and canonical form
from .chain import Chain
from .canon import (
    Canonical,
    canon_array,
    canon_equal,
    canon_map,
    canon_number,
    canon_value,
)
from .models import Kind, format_value

# Wrappers
from .array import Array
from .boolean import Boolean
from .null import Null
from .number import Number
from .object import Object
from .string import String
from .value import Value

__all__ = [
    # Chain and canonical form
    "Chain",
    "Canonical",
    "canon_array",
    "canon_equal",
    "canon_map",
    "canon_number",
    "canon_value",
    "Kind",
    "format_value",
    # Wrappers
    "Array",
    "Boolean",
    "Null",
    "Number",
    "Object",
    "String",
    "Value",
]
