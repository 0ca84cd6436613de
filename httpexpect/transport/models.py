"""
Transport layer models.

This module defines the data structures for HTTP requests, responses,
and transport-level error handling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from multidict import CIMultiDict


class TransportErrorCode(IntEnum):
    """Why a request produced no HTTP response."""
    CONNECTION_ERROR = 1
    TIMEOUT_ERROR = 2
    INTERNAL_ERROR = 3


@dataclass
class TransportError:
    """Represents a failure to obtain an HTTP response."""
    code: int
    message: str
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.data is not None:
            result["data"] = self.data
        return result

    def __str__(self) -> str:
        return self.message

    @classmethod
    def connection_error(cls, message: str, data: Any = None) -> TransportError:
        return cls(TransportErrorCode.CONNECTION_ERROR, message, data)

    @classmethod
    def timeout_error(cls, message: str, data: Any = None) -> TransportError:
        return cls(TransportErrorCode.TIMEOUT_ERROR, message, data)

    @classmethod
    def internal_error(cls, message: str, data: Any = None) -> TransportError:
        return cls(TransportErrorCode.INTERNAL_ERROR, message, data)


@dataclass
class HTTPRequest:
    """An HTTP request ready to be sent."""
    method: str
    url: str
    headers: CIMultiDict[str] = field(default_factory=CIMultiDict)
    params: list[tuple[str, str]] = field(default_factory=list)
    body: bytes | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "headers": dict(self.headers),
            "params": list(self.params),
            "body": self.body.decode("utf-8", errors="replace") if self.body else None,
        }


@dataclass
class HTTPResponse:
    """Represents the result of sending an HTTP request."""
    status: int = 0
    reason: str = ""
    headers: CIMultiDict[str] = field(default_factory=CIMultiDict)
    body: bytes = b""
    error: TransportError | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def content_type(self) -> str:
        return self.headers.get("Content-Type", "")

    def text(self, encoding: str = "utf-8") -> str:
        return self.body.decode(encoding, errors="replace")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        if self.success:
            return {
                "success": True,
                "status": self.status,
                "reason": self.reason,
                "headers": dict(self.headers),
                "body": self.text(),
            }
        return {
            "success": False,
            "error": self.error.to_dict() if self.error else None,
        }

    @classmethod
    def from_error(cls, error: TransportError) -> HTTPResponse:
        """Create a response from a transport-level error."""
        return cls(error=error)
