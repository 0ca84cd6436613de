"""
Canonical form of values compared for equality.

Whenever values are checked for equality they are first converted to
canonical form, which is what a JSON encode/decode round trip yields:

- every real number (int, float, Decimal, Fraction) becomes a float
- tuples and lists become lists
- mappings become dicts with string keys
- enum members are replaced by their values
- objects implementing ``to_dict()`` are replaced by its result

Anything else (sets, bytes, functions, NaN, arbitrary objects) cannot
be represented and fails the chain.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .chain import Chain


@runtime_checkable
class Canonical(Protocol):
    """Domain objects that can be compared against JSON payloads."""

    def to_dict(self) -> Any:
        ...


class CanonError(TypeError):
    """Raised internally when a value has no canonical form."""


def canon_value(chain: Chain, value: Any) -> tuple[Any, bool]:
    """Convert any value to canonical form."""
    try:
        return _canon(value), True
    except CanonError as e:
        chain.fail("expected JSON-compatible value, but %s", e)
        return None, False


def canon_number(chain: Chain, number: Any) -> tuple[float, bool]:
    """Convert a numeric value to float."""
    try:
        return _canon_number(number), True
    except CanonError as e:
        chain.fail("expected numeric value, but %s", e)
        return 0.0, False


def canon_array(chain: Chain, array: Any) -> tuple[list[Any], bool]:
    """Convert a sequence to a canonical list."""
    if not _is_sequence(array):
        chain.fail("expected array value, but got %s", type(array).__name__)
        return [], False
    value, ok = canon_value(chain, array)
    if not ok:
        return [], False
    return value, True


def canon_map(chain: Chain, mapping: Any) -> tuple[dict[str, Any], bool]:
    """Convert a mapping (or an object with to_dict()) to a canonical dict."""
    value, ok = canon_value(chain, mapping)
    if not ok:
        return {}, False
    if not isinstance(value, dict):
        chain.fail("expected map value, but got %s", type(mapping).__name__)
        return {}, False
    return value, True


def canon_equal(a: Any, b: Any) -> bool:
    """
    Deep structural equality over canonical values.

    Unlike ``==``, kinds must match: ``True`` never equals ``1.0``.
    """
    if a is None or b is None:
        return a is None and b is None
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, float) or isinstance(b, float):
        return isinstance(a, float) and isinstance(b, float) and a == b
    if isinstance(a, str) or isinstance(b, str):
        return isinstance(a, str) and isinstance(b, str) and a == b
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(canon_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict) and isinstance(b, dict):
        if a.keys() != b.keys():
            return False
        return all(canon_equal(a[k], b[k]) for k in a)
    return False


def canon_contains(container: list[Any], value: Any) -> bool:
    """Return True if a canonical list holds an element equal to value."""
    return any(canon_equal(e, value) for e in container)


def _canon(value: Any, seen: frozenset[int] = frozenset()) -> Any:
    if value is None:
        return None
    if isinstance(value, Enum):
        return _canon(value.value, seen)
    if isinstance(value, bool):
        return value
    if isinstance(value, (Real, Decimal)):
        return _canon_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        seen = _enter(value, seen)
        return {_canon_key(k): _canon(v, seen) for k, v in value.items()}
    if _is_sequence(value):
        seen = _enter(value, seen)
        return [_canon(v, seen) for v in value]
    if isinstance(value, Canonical):
        seen = _enter(value, seen)
        return _canon(value.to_dict(), seen)
    raise CanonError(f"got unsupported type {type(value).__name__}")


def _enter(container: Any, seen: frozenset[int]) -> frozenset[int]:
    """Add a container to the ids on the current path; a repeat is a cycle."""
    if id(container) in seen:
        raise CanonError("got a reference cycle")
    return seen | {id(container)}


def _canon_key(key: Any) -> str:
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, str):
        return key
    if isinstance(key, int) and not isinstance(key, bool):
        return str(key)
    raise CanonError(f"got unsupported map key {key!r}")


def _canon_number(number: Any) -> float:
    if isinstance(number, Enum):
        number = number.value
    if isinstance(number, bool) or not isinstance(number, (Real, Decimal)):
        raise CanonError(f"got {type(number).__name__} ({number!r})")
    try:
        result = float(number)
    except OverflowError:
        raise CanonError(f"got {number!r} which overflows float") from None
    except ValueError:
        raise CanonError(f"got unsupported value {number!r}") from None
    if math.isnan(result) or math.isinf(result):
        raise CanonError(f"got unsupported value {number!r}")
    return result


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray, memoryview))
