"""
Transport Layer

This package provides transport implementations that turn HTTP requests
into responses, either over the network or by serving an aiohttp
application in-process.

Usage:
    from httpexpect.transport import HTTPTransport, HTTPRequest

    async with HTTPTransport() as transport:
        response = await transport.send(HTTPRequest("GET", "http://localhost:8080/"))

        if response.success:
            print(response.status, response.text())
        else:
            print(response.error)
"""

# Factory
from .factory import create_transport

# Transport implementations
from .base import BaseTransport
from .http import HTTPTransport
from .app import AppTransport

# Models
from .models import (
    HTTPRequest,
    HTTPResponse,
    TransportError,
    TransportErrorCode,
)

__all__ = [
    # Factory
    "create_transport",
    # Base
    "BaseTransport",
    # Implementations
    "HTTPTransport",
    "AppTransport",
    # Models
    "HTTPRequest",
    "HTTPResponse",
    "TransportError",
    "TransportErrorCode",
]
