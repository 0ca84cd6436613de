"""
HTTP transport.

This module sends requests over the network with an aiohttp client
session, applying configured authentication headers.
"""

from __future__ import annotations

import asyncio
import base64
import logging
from typing import TYPE_CHECKING

import aiohttp
from multidict import CIMultiDict

from .base import BaseTransport
from .models import HTTPRequest, HTTPResponse, TransportError

if TYPE_CHECKING:
    from ..config import AuthConfig

logger = logging.getLogger(__name__)

AUTHORIZATION = "Authorization"


class HTTPTransport(BaseTransport):
    """
    Sends requests with aiohttp.

    Example:
        async with HTTPTransport() as transport:
            response = await transport.send(HTTPRequest("GET", "http://localhost:8080/users"))
    """

    def __init__(self, auth_config: AuthConfig | None = None):
        """
        Initialize HTTP transport.

        Args:
            auth_config: Optional authentication configuration
        """
        self._auth_config = auth_config
        self._session: aiohttp.ClientSession | None = None
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected and self._session is not None

    def _build_headers(self, request: HTTPRequest) -> CIMultiDict[str]:
        """Merge auth headers under the request's own headers."""
        headers: CIMultiDict[str] = CIMultiDict()
        self._apply_auth_headers(headers)
        for name in set(request.headers.keys()):
            headers.popall(name, None)
        headers.extend(request.headers)
        return headers

    def _apply_auth_headers(self, headers: CIMultiDict[str]) -> None:
        """Apply authentication headers based on auth config."""
        if self._auth_config is None:
            return

        auth_type = self._auth_config.type.value

        if auth_type == "bearer":
            token = self._auth_config.token
            if token:
                headers[AUTHORIZATION] = f"Bearer {token}"
                logger.debug("Applied bearer auth header")

        elif auth_type == "api_key":
            key = self._auth_config.key
            header_name = self._auth_config.header or "X-API-Key"
            if key:
                headers[header_name] = key
                logger.debug(f"Applied API key auth header: {header_name}")

        elif auth_type == "basic":
            username = self._auth_config.username
            password = self._auth_config.password
            if username and password:
                credentials = base64.b64encode(
                    f"{username}:{password}".encode()
                ).decode("ascii")
                headers[AUTHORIZATION] = f"Basic {credentials}"
                logger.debug("Applied basic auth header")

    def _target_url(self, request: HTTPRequest) -> str:
        return request.url

    async def connect(self) -> None:
        """Create the HTTP session."""
        if self._session is None:
            self._session = aiohttp.ClientSession()
        self._connected = True

    async def disconnect(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
        self._connected = False

    async def send(self, request: HTTPRequest, timeout_ms: int = 30000) -> HTTPResponse:
        """
        Send a request over HTTP.

        Args:
            request: The request to send
            timeout_ms: Timeout in milliseconds

        Returns:
            HTTPResponse with status and body, or an error
        """
        if not self.is_connected:
            return HTTPResponse.from_error(
                TransportError.connection_error("Transport not connected. Call connect() first.")
            )

        url = self._target_url(request)
        timeout = aiohttp.ClientTimeout(total=timeout_ms / 1000)

        try:
            async with self._session.request(
                request.method,
                url,
                params=request.params or None,
                headers=self._build_headers(request),
                data=request.body,
                timeout=timeout,
            ) as resp:
                body = await resp.read()
                logger.debug(f"{request.method} {url} -> {resp.status} ({len(body)} bytes)")
                return HTTPResponse(
                    status=resp.status,
                    reason=resp.reason or "",
                    headers=CIMultiDict(resp.headers),
                    body=body,
                )

        except asyncio.TimeoutError:
            return HTTPResponse.from_error(
                TransportError.timeout_error(
                    f"Request timed out after {timeout_ms}ms",
                    data={"url": url, "method": request.method},
                )
            )
        except aiohttp.ClientConnectorError as e:
            return HTTPResponse.from_error(
                TransportError.connection_error(
                    f"Connection failed: {e}",
                    data={"url": url},
                )
            )
        except aiohttp.ClientError as e:
            return HTTPResponse.from_error(
                TransportError.connection_error(
                    f"HTTP error: {e}",
                    data={"url": url},
                )
            )
        except ValueError as e:
            return HTTPResponse.from_error(
                TransportError.internal_error(
                    f"Invalid request: {e}",
                    data={"url": url, "method": request.method},
                )
            )

    def __repr__(self) -> str:
        status = "connected" if self.is_connected else "disconnected"
        return f"{type(self).__name__}(status={status})"
