"""
Transport factory for creating transports from settings.

This module provides a factory function to create the appropriate
transport for a parsed settings file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import BaseTransport
from .http import HTTPTransport

if TYPE_CHECKING:
    from ..config import Settings


def create_transport(settings: Settings) -> BaseTransport:
    """
    Create a transport instance from Settings.

    Args:
        settings: Parsed settings file

    Returns:
        HTTPTransport configured with the server's auth

    Raises:
        ValueError: If the server URL is missing

    Example:
        settings, _ = load_settings("httpexpect.yaml")
        transport = create_transport(settings)

        async with transport:
            response = await transport.send(...)
    """
    if not settings.server.url:
        raise ValueError("HTTP transport requires a 'url' in server config")
    return HTTPTransport(auth_config=settings.server.auth)
