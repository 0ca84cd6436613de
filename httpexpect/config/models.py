"""
Typed data structures for settings files.

This module contains all enums and dataclasses that represent
the internal typed structure of a parsed settings file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ─────────────────────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────────────────────

class ReporterType(str, Enum):
    """Stock reporters selectable from a settings file."""
    ASSERT = "assert"    # record failures, raise on verify()
    REQUIRE = "require"  # raise on the first failure
    LOG = "log"          # log failures and continue


class PrinterType(str, Enum):
    """Stock printers selectable from a settings file."""
    COMPACT = "compact"
    DEBUG = "debug"
    CURL = "curl"


class AuthType(str, Enum):
    """Supported authentication types for HTTP transport."""
    BEARER = "bearer"
    API_KEY = "api_key"
    BASIC = "basic"


# ─────────────────────────────────────────────────────────────────────────────
# Auth Configuration
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class AuthConfig:
    """
    Authentication configuration for HTTP transport.

    Supports three auth types:
    - bearer: Uses Authorization: Bearer <token> header
    - api_key: Uses a custom header with the API key
    - basic: Uses Authorization: Basic <base64(user:pass)> header
    """
    type: AuthType
    # For bearer auth
    token: str | None = None
    # For api_key auth
    header: str = "X-API-Key"
    key: str | None = None
    # For basic auth
    username: str | None = None
    password: str | None = None


# ─────────────────────────────────────────────────────────────────────────────
# Server & Defaults
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ServerConfig:
    """Where requests are sent."""
    url: str = ""
    auth: AuthConfig | None = None


@dataclass
class Defaults:
    """Default settings applied to every request."""
    timeout_ms: int = 30000
    headers: dict[str, str] = field(default_factory=dict)


# ─────────────────────────────────────────────────────────────────────────────
# Settings
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Settings:
    """Fully parsed and validated settings file."""
    version: int
    name: str
    server: ServerConfig
    defaults: Defaults = field(default_factory=Defaults)
    reporter: ReporterType = ReporterType.ASSERT
    printers: list[PrinterType] = field(default_factory=list)
    env: dict[str, Any] = field(default_factory=dict)
