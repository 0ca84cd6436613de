"""
Request builder.

A Request collects method, URL, query, headers and body, then sends
itself through the configured transport and wraps the outcome in a
Response. Builder misuse is reported through the request's chain.
"""

from __future__ import annotations

import base64
import json
import logging
import time
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any
from urllib.parse import quote, urlencode

from multidict import CIMultiDict

from .assertions import Chain, Canonical
from .response import Response
from .transport.models import HTTPRequest, HTTPResponse

if TYPE_CHECKING:
    from .expect import Config

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Request:
    """
    Provides methods to build and send an HTTP request.

    The path may contain ``{}`` placeholders; positional args are
    URL-quoted and substituted into it.

    Example:
        request = Request(config, "GET", "/users/{}", user_id)
        response = await request.with_query("verbose", 1).expect()
    """

    def __init__(self, config: Config, method: str, path: str, *args: Any):
        self.config = config
        self.chain = Chain(config.reporter)
        self.method = method.upper()
        self.headers: CIMultiDict[str] = CIMultiDict()
        self.params: list[tuple[str, str]] = []
        self.body: bytes | None = None
        self.url = _concat_urls(config.base_url, self._format_path(path, args))

    def _format_path(self, path: str, args: tuple[Any, ...]) -> str:
        if not args:
            return path
        quoted = [quote(str(arg), safe="") for arg in args]
        try:
            return path.format(*quoted)
        except (IndexError, KeyError, ValueError) as e:
            self.chain.fail("failed to substitute arguments into path %r: %s", path, e)
            return path

    @property
    def failed(self) -> bool:
        return self.chain.failed

    # ─────────────────────────────────────────────────────────────────────
    # Query & headers
    # ─────────────────────────────────────────────────────────────────────

    def with_query(self, key: str, value: Any) -> Request:
        """
        Adds query parameter to request URL.

        Example:
            request.with_query("limit", 10).with_query("tag", "a").with_query("tag", "b")
        """
        self.params.append((key, str(value)))
        return self

    def with_header(self, name: str, value: str) -> Request:
        """Adds given header to request, replacing any previous value."""
        self.headers[name] = value
        return self

    def with_headers(self, headers: dict[str, str]) -> Request:
        """Adds given headers to request."""
        for name, value in headers.items():
            self.with_header(name, value)
        return self

    def with_basic_auth(self, username: str, password: str) -> Request:
        """Sets the Authorization header to use HTTP Basic Authentication."""
        credentials = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
        return self.with_header("Authorization", f"Basic {credentials}")

    # ─────────────────────────────────────────────────────────────────────
    # Body
    # ─────────────────────────────────────────────────────────────────────

    def with_json(self, obj: Any) -> Request:
        """
        Sets request body to JSON-encoded object and sets Content-Type
        to "application/json; charset=utf-8".

        Example:
            request.with_json({"name": "john"})
        """
        if self.chain.failed:
            return self
        try:
            data = json.dumps(obj, default=_json_default).encode("utf-8")
        except (TypeError, ValueError) as e:
            self.chain.fail("failed to encode request body as JSON: %s", e)
            return self
        return self._set_body(data, JSON_CONTENT_TYPE)

    def with_text(self, text: str) -> Request:
        """Sets request body to given string with "text/plain" Content-Type."""
        return self._set_body(text.encode("utf-8"), TEXT_CONTENT_TYPE)

    def with_bytes(self, data: bytes, content_type: str | None = None) -> Request:
        """Sets request body to given bytes, optionally with a Content-Type."""
        return self._set_body(bytes(data), content_type)

    def with_form(self, form: dict[str, Any]) -> Request:
        """
        Sets request body to URL-encoded form and sets Content-Type to
        "application/x-www-form-urlencoded".

        Example:
            request.with_form({"name": "john", "tags": ["a", "b"]})
        """
        data = urlencode(form, doseq=True).encode("ascii")
        return self._set_body(data, FORM_CONTENT_TYPE)

    def _set_body(self, data: bytes, content_type: str | None) -> Request:
        if self.chain.failed:
            return self
        if self.body is not None:
            self.chain.fail("request body is already set")
            return self
        self.body = data
        if content_type is not None:
            self.headers["Content-Type"] = content_type
        return self

    # ─────────────────────────────────────────────────────────────────────
    # Sending
    # ─────────────────────────────────────────────────────────────────────

    def build(self) -> HTTPRequest:
        """Build the HTTPRequest that expect() will send."""
        headers: CIMultiDict[str] = CIMultiDict(self.config.headers)
        for name in set(self.headers.keys()):
            headers.popall(name, None)
        headers.extend(self.headers)
        return HTTPRequest(
            method=self.method,
            url=self.url,
            headers=headers,
            params=list(self.params),
            body=self.body,
        )

    async def expect(self) -> Response:
        """
        Sends the request and returns a Response for inspection.

        If the request chain already failed, nothing is sent and the
        returned Response is inert.

        Example:
            response = await request.expect()
            response.status(200)
        """
        if self.chain.failed:
            return Response._wrap(self.chain.derive(), HTTPResponse())

        request = self.build()
        for printer in self.config.printers:
            printer.request(request)

        start = time.perf_counter()
        response = await self.config.transport.send(request, timeout_ms=self.config.timeout_ms)
        duration_ms = (time.perf_counter() - start) * 1000

        for printer in self.config.printers:
            printer.response(response, duration_ms)

        if response.error is not None:
            logger.debug(f"{self.method} {self.url} failed: {response.error}")
            self.chain.fail("request failed: %s %s\n%s", self.method, self.url, response.error.message)
        else:
            logger.debug(f"{self.method} {self.url} -> {response.status} in {duration_ms:.1f}ms")

        return Response._wrap(self.chain.derive(), response, duration_ms)

    def __repr__(self) -> str:
        return f"Request({self.method} {self.url})"


def _concat_urls(base: str, path: str) -> str:
    if not base:
        return path
    if not path:
        return base
    return base.rstrip("/") + "/" + path.lstrip("/")


def _json_default(obj: Any) -> Any:
    if isinstance(obj, Canonical):
        return obj.to_dict()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Decimal):
        return float(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
