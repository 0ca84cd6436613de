"""
Base transport interface.

This module defines the abstract base class that all transport
implementations must follow.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import HTTPRequest, HTTPResponse


class BaseTransport(ABC):
    """
    Abstract base class for transports.

    Transports turn an HTTPRequest into an HTTPResponse, whether over
    the network or by invoking an application in-process. Failures are
    returned as HTTPResponse.from_error(...) rather than raised.
    """

    @abstractmethod
    async def connect(self) -> None:
        """
        Prepare the transport for sending.

        For HTTP, this opens the client session.
        For an in-process app, this starts the test server.
        """
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Release the resources acquired by connect()."""
        pass

    @abstractmethod
    async def send(self, request: HTTPRequest, timeout_ms: int = 30000) -> HTTPResponse:
        """
        Send a request and get the response.

        Args:
            request: The request to send
            timeout_ms: Timeout in milliseconds

        Returns:
            HTTPResponse with either a status or an error
        """
        pass

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Return True if the transport is currently connected."""
        pass

    async def __aenter__(self) -> BaseTransport:
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.disconnect()
