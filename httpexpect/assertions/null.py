"""
Null wrapper (Python representation of a JSON null).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import Wrapper
from .models import format_value

if TYPE_CHECKING:
    from ..reporting import Reporter


class Null(Wrapper):
    """Asserts that the attached payload is None."""

    __slots__ = ()
    zero = None

    def __init__(self, reporter: Reporter, value: Any = None):
        super().__init__(reporter, None)
        if value is not None:
            self.chain.fail("expected null value, but got %s", format_value(value))

    def raw(self) -> None:
        return None
