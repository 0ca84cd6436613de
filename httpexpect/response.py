"""
Response wrapper.

A Response pairs a chain with a received HTTPResponse and hands out
typed wrappers over its status, headers and body.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from aiohttp.helpers import parse_mimetype
from multidict import MultiDictProxy

from .assertions import Chain, Number, Object, String, Value, canon_value, format_value
from .transport.models import HTTPResponse

if TYPE_CHECKING:
    from .reporting import Reporter

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"


class Response:
    """
    Provides methods to inspect an HTTP response.

    Example:
        response = Response(reporter, http_response)
        response.status(200).json().object().value_equal("id", 1)
    """

    def __init__(self, reporter: Reporter, response: HTTPResponse | None, duration_ms: float = 0.0):
        self.chain = Chain(reporter)
        self.duration_ms = duration_ms
        self._response = response if response is not None else HTTPResponse()
        if response is None:
            self.chain.fail("expected non-null response")
        elif response.error is not None:
            self.chain.fail("request failed: %s", response.error.message)

    @classmethod
    def _wrap(cls, chain: Chain, response: HTTPResponse, duration_ms: float = 0.0) -> Response:
        wrapper = cls.__new__(cls)
        wrapper.chain = chain
        wrapper.duration_ms = duration_ms
        wrapper._response = response
        return wrapper

    @property
    def failed(self) -> bool:
        return self.chain.failed

    def raw(self) -> HTTPResponse:
        """Return the underlying HTTPResponse."""
        return self._response

    def duration(self) -> Number:
        """Returns a Number holding the round trip time in milliseconds."""
        return Number._wrap(self.chain.derive(), float(self.duration_ms))

    def status(self, code: int) -> Response:
        """
        Succeeds if response contains given status code.

        Example:
            response.status(200)
        """
        if self.chain.failed:
            return self
        if self._response.status != code:
            self.chain.fail(
                "expected status == %s, but got %s %s",
                code, self._response.status, self._response.reason,
            )
        return self

    def headers(self) -> Object:
        """
        Returns an Object with all response headers.

        Repeated headers are joined with ", ".

        Example:
            response.headers().value("Content-Type").string().equal("application/json")
        """
        data: dict[str, str] = {}
        for name in self._response.headers.keys():
            if name not in data:
                data[name] = ", ".join(self._response.headers.getall(name))
        return Object._wrap(self.chain.derive(), data)

    def header(self, name: str) -> String:
        """
        Returns a String with the value of the given header.

        Lookup is case-insensitive; a missing header yields "".

        Example:
            response.header("Content-Type").equal("application/json")
        """
        values = self._response.headers.getall(name, [])
        return String._wrap(self.chain.derive(), ", ".join(values))

    def body(self) -> String:
        """
        Returns a String with the response body.

        Example:
            response.body().not_empty()
        """
        return String._wrap(self.chain.derive(), self._response.text())

    def no_content(self) -> Response:
        """
        Succeeds if response contains empty Content-Type header and
        empty body.
        """
        if self.chain.failed:
            return self
        content_type = self._response.headers.get("Content-Type", "")
        if content_type != "":
            self.chain.fail(
                "expected empty \"Content-Type\" header, but got %s",
                format_value(content_type),
            )
            return self
        if self._response.body:
            self.chain.fail(
                "expected empty body, but got %s",
                format_value(self._response.text()),
            )
        return self

    def content_type(self, media_type: str, charset: str | None = None) -> Response:
        """
        Succeeds if response contains Content-Type header with given
        media type and charset.

        If charset is omitted, it may be either empty or utf-8.

        Example:
            response.content_type("application/json")
            response.content_type("text/html", "utf-8")
        """
        self._check_content_type(media_type, charset)
        return self

    def json(self) -> Value:
        """
        Returns a Value with the decoded JSON body.

        Requires "application/json" Content-Type with empty or utf-8
        charset; a body that isn't valid JSON fails the chain.

        Example:
            response.json().array().elements("foo", "bar")
        """
        if not self._check_content_type(JSON_CONTENT_TYPE):
            return Value._failed(self.chain)
        try:
            data = json.loads(self._response.body)
        except (ValueError, UnicodeDecodeError) as e:
            self.chain.fail("failed to decode JSON body: %s\n\nbody:\n%s", e, self._response.text())
            return Value._failed(self.chain)
        value, ok = canon_value(self.chain, data)
        if not ok:
            return Value._failed(self.chain)
        return Value._wrap(self.chain.derive(), value)

    def text(self) -> String:
        """
        Returns a String with the body, requiring "text/plain" Content-Type.

        Example:
            response.text().equal("hello, world!")
        """
        if not self._check_content_type(TEXT_CONTENT_TYPE):
            return String._failed(self.chain)
        return String._wrap(self.chain.derive(), self._response.text())

    def _check_content_type(self, expected_type: str, expected_charset: str | None = None) -> bool:
        if self.chain.failed:
            return False

        content_type = self._response.headers.get("Content-Type", "")
        parsed = _parse_media_type(content_type)
        if parsed is None:
            self.chain.fail("got invalid \"Content-Type\" header %s", format_value(content_type))
            return False

        media_type, params = parsed
        if media_type != expected_type.lower():
            self.chain.fail(
                "expected \"Content-Type\" header with %s media type,\nbut got %s",
                format_value(expected_type), format_value(media_type),
            )
            return False

        charset = params.get("charset", "")
        if expected_charset is None:
            if charset and charset.lower() != "utf-8":
                self.chain.fail(
                    "expected \"Content-Type\" header with \"utf-8\" or empty charset,\nbut got %s",
                    format_value(charset),
                )
                return False
        elif charset.lower() != expected_charset.lower():
            self.chain.fail(
                "expected \"Content-Type\" header with %s charset,\nbut got %s",
                format_value(expected_charset), format_value(charset),
            )
            return False

        return True

    def __repr__(self) -> str:
        status = "failed" if self.chain.failed else "ok"
        return f"Response({self._response.status}, {status})"


def _parse_media_type(value: str) -> tuple[str, MultiDictProxy[str]] | None:
    """Split a Content-Type value into lowercased media type and params."""
    mimetype = parse_mimetype(value)
    if not mimetype.type or not mimetype.subtype:
        return None
    media_type = f"{mimetype.type}/{mimetype.subtype}"
    if mimetype.suffix:
        media_type += f"+{mimetype.suffix}"
    return media_type, mimetype.parameters
