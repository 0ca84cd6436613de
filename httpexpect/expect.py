"""
Top-level entry point.

Expect holds a Config shared by all requests it creates and offers
shorthands for wrapping arbitrary values in assertion wrappers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .assertions import Array, Boolean, Null, Number, Object, String, Value
from .config import PrinterType, ReporterType, Settings
from .printers import CompactPrinter, CurlPrinter, DebugPrinter, Printer
from .reporting import AssertReporter, LoggingReporter, Reporter, RequireReporter
from .request import Request
from .transport import BaseTransport, HTTPTransport, create_transport

logger = logging.getLogger(__name__)

REPORTERS: dict[ReporterType, type[Reporter]] = {
    ReporterType.ASSERT: AssertReporter,
    ReporterType.REQUIRE: RequireReporter,
    ReporterType.LOG: LoggingReporter,
}

PRINTERS: dict[PrinterType, type[Printer]] = {
    PrinterType.COMPACT: CompactPrinter,
    PrinterType.DEBUG: DebugPrinter,
    PrinterType.CURL: CurlPrinter,
}


@dataclass
class Config:
    """
    Configuration shared by all requests created by an Expect.

    reporter is required. transport defaults to a new HTTPTransport.
    headers are sent with every request unless the request overrides them.
    """
    reporter: Reporter | None = None
    base_url: str = ""
    transport: BaseTransport | None = None
    printers: list[Printer] = field(default_factory=list)
    timeout_ms: int = 30000
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.transport is None:
            self.transport = HTTPTransport()


class Expect:
    """
    Creates requests and wraps values for assertion.

    Example:
        config = Config(reporter=AssertReporter(), base_url="http://localhost:8080")

        async with Expect(config) as e:
            response = await e.get("/users/{}", 42).expect()
            response.status(200).json().object().value_equal("id", 42)

        config.reporter.verify()
    """

    def __init__(self, config: Config):
        if config.reporter is None:
            raise ValueError("Config.reporter is required")
        self.config = config

    @classmethod
    def from_settings(cls, settings: Settings, reporter: Reporter | None = None) -> Expect:
        """
        Create an Expect from a parsed settings file.

        Args:
            settings: Parsed settings
            reporter: Reporter to use instead of the one named in settings

        Raises:
            ValueError: If the server URL is missing
        """
        if reporter is None:
            reporter = REPORTERS[settings.reporter]()
        config = Config(
            reporter=reporter,
            base_url=settings.server.url,
            transport=create_transport(settings),
            printers=[PRINTERS[p]() for p in settings.printers],
            timeout_ms=settings.defaults.timeout_ms,
            headers=dict(settings.defaults.headers),
        )
        logger.info(f"Configured '{settings.name}' against {settings.server.url}")
        return cls(config)

    @property
    def reporter(self) -> Reporter:
        return self.config.reporter

    # ─────────────────────────────────────────────────────────────────────
    # Requests
    # ─────────────────────────────────────────────────────────────────────

    def request(self, method: str, path: str, *args: Any) -> Request:
        """
        Returns a new Request for the given method and path.

        Example:
            e.request("GET", "/repos/{}/{}", user, repo)
        """
        return Request(self.config, method, path, *args)

    def options(self, path: str, *args: Any) -> Request:
        return self.request("OPTIONS", path, *args)

    def head(self, path: str, *args: Any) -> Request:
        return self.request("HEAD", path, *args)

    def get(self, path: str, *args: Any) -> Request:
        return self.request("GET", path, *args)

    def post(self, path: str, *args: Any) -> Request:
        return self.request("POST", path, *args)

    def put(self, path: str, *args: Any) -> Request:
        return self.request("PUT", path, *args)

    def patch(self, path: str, *args: Any) -> Request:
        return self.request("PATCH", path, *args)

    def delete(self, path: str, *args: Any) -> Request:
        return self.request("DELETE", path, *args)

    # ─────────────────────────────────────────────────────────────────────
    # Value shorthands
    # ─────────────────────────────────────────────────────────────────────

    def value(self, value: Any) -> Value:
        """Wrap any JSON-compatible value."""
        return Value(self.reporter, value)

    def object(self, value: Any) -> Object:
        return Object(self.reporter, value)

    def array(self, value: Any) -> Array:
        return Array(self.reporter, value)

    def string(self, value: str) -> String:
        return String(self.reporter, value)

    def number(self, value: Any) -> Number:
        return Number(self.reporter, value)

    def boolean(self, value: bool) -> Boolean:
        return Boolean(self.reporter, value)

    def null(self, value: Any = None) -> Null:
        return Null(self.reporter, value)

    # ─────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────

    async def __aenter__(self) -> Expect:
        await self.config.transport.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.config.transport.disconnect()
