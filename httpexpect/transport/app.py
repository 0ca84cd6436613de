"""
In-process transport for aiohttp applications.

This module serves an aiohttp.web.Application on a local test server,
so tests can exercise an application without deploying it first.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aiohttp import web
from aiohttp.test_utils import TestServer
from yarl import URL

from .http import HTTPTransport
from .models import HTTPRequest

if TYPE_CHECKING:
    from ..config import AuthConfig

logger = logging.getLogger(__name__)


class AppTransport(HTTPTransport):
    """
    Sends requests to an aiohttp application served in-process.

    The scheme and host of each request URL are replaced with those of
    the test server; path and query are kept.

    Example:
        app = web.Application()
        app.router.add_get("/users", list_users)

        async with AppTransport(app) as transport:
            response = await transport.send(HTTPRequest("GET", "http://example.com/users"))
    """

    def __init__(self, app: web.Application, auth_config: AuthConfig | None = None):
        super().__init__(auth_config=auth_config)
        self.app = app
        self._server: TestServer | None = None

    @property
    def is_connected(self) -> bool:
        return super().is_connected and self._server is not None

    def _target_url(self, request: HTTPRequest) -> str:
        raw_path_qs = URL(request.url).raw_path_qs or "/"
        return str(self._server.make_url(URL(raw_path_qs, encoded=True)))

    async def connect(self) -> None:
        """Start the test server and create the HTTP session."""
        if self._server is None:
            self._server = TestServer(self.app)
            await self._server.start_server()
            logger.info(f"Serving application at {self._server.make_url('/')}")
        await super().connect()

    async def disconnect(self) -> None:
        """Close the HTTP session and stop the test server."""
        await super().disconnect()
        if self._server is not None:
            await self._server.close()
            self._server = None
