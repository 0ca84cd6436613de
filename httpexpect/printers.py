"""
Printers for requests and responses.

Printers are called by Request.expect() before a request is sent and
after its response is received. They write through the logging module;
pass a logger to send output somewhere other than ``httpexpect.printers``.
"""

from __future__ import annotations

import logging
import shlex
from abc import ABC, abstractmethod

from yarl import URL

from .transport.models import HTTPRequest, HTTPResponse


class Printer(ABC):
    """Receives every request and response passing through Expect."""

    @abstractmethod
    def request(self, request: HTTPRequest) -> None:
        """Called before request is sent."""
        pass

    @abstractmethod
    def response(self, response: HTTPResponse, duration_ms: float) -> None:
        """Called after response is received."""
        pass


class CompactPrinter(Printer):
    """Logs one line per request: method and URL."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def request(self, request: HTTPRequest) -> None:
        self.logger.info(f"{request.method} {_full_url(request)}")

    def response(self, response: HTTPResponse, duration_ms: float) -> None:
        pass


class DebugPrinter(Printer):
    """Logs requests and responses in full, optionally including bodies."""

    def __init__(self, logger: logging.Logger | None = None, body: bool = True):
        self.logger = logger or logging.getLogger(__name__)
        self.body = body

    def request(self, request: HTTPRequest) -> None:
        lines = [f"{request.method} {_full_url(request)} HTTP/1.1"]
        lines.extend(f"{name}: {value}" for name, value in request.headers.items())
        if self.body and request.body:
            lines.append("")
            lines.append(request.body.decode("utf-8", errors="replace"))
        self.logger.info("\n".join(lines))

    def response(self, response: HTTPResponse, duration_ms: float) -> None:
        if not response.success:
            self.logger.info(f"request failed after {duration_ms:.0f}ms: {response.error}")
            return
        lines = [f"HTTP/1.1 {response.status} {response.reason}"]
        lines.extend(f"{name}: {value}" for name, value in response.headers.items())
        if self.body and response.body:
            lines.append("")
            lines.append(response.text())
        lines.append("")
        lines.append(f"{duration_ms:.0f}ms")
        self.logger.info("\n".join(lines))


class CurlPrinter(Printer):
    """Logs an equivalent curl command for every request."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def request(self, request: HTTPRequest) -> None:
        self.logger.info(to_curl(request))

    def response(self, response: HTTPResponse, duration_ms: float) -> None:
        pass


def to_curl(request: HTTPRequest) -> str:
    """Render a request as a curl command line."""
    parts = ["curl", "-X", request.method]
    for name, value in request.headers.items():
        parts.extend(["-H", f"{name}: {value}"])
    if request.body:
        parts.extend(["-d", request.body.decode("utf-8", errors="replace")])
    parts.append(_full_url(request))
    return " ".join(shlex.quote(p) for p in parts)


def _full_url(request: HTTPRequest) -> str:
    if not request.params:
        return request.url
    return str(URL(request.url).extend_query(request.params))
