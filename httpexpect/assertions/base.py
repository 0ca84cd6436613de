"""
Plumbing shared by all value wrappers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from .chain import Chain

if TYPE_CHECKING:
    from ..reporting import Reporter

W = TypeVar("W", bound="Wrapper")


class Wrapper:
    """
    A chain paired with an immutable payload.

    Public constructors take a reporter and a raw value and validate it.
    Wrappers produced by navigation are built with ``_wrap()`` from an
    already derived chain and an already canonical payload.
    """

    __slots__ = ("chain", "_value")

    # Payload of a wrapper produced by a failed narrowing
    zero: Any = None

    def __init__(self, reporter: Reporter, value: Any):
        self.chain = Chain(reporter)
        self._value = value

    @classmethod
    def _wrap(cls: type[W], chain: Chain, value: Any) -> W:
        wrapper = cls.__new__(cls)
        wrapper.chain = chain
        wrapper._value = value
        return wrapper

    @classmethod
    def _failed(cls: type[W], chain: Chain) -> W:
        """Wrap the zero payload under a derived chain (already failed)."""
        return cls._wrap(chain.derive(), cls._zero())

    @classmethod
    def _zero(cls) -> Any:
        zero = cls.zero
        if isinstance(zero, (dict, list)):
            return type(zero)()
        return zero

    @property
    def failed(self) -> bool:
        return self.chain.failed

    def raw(self) -> Any:
        """Return the underlying payload."""
        return self._value

    def __repr__(self) -> str:
        status = "failed" if self.chain.failed else "ok"
        return f"{type(self).__name__}({self._value!r}, {status})"
