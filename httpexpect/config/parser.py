"""
Settings parser.

This module converts validated YAML data into typed Settings structures,
resolving ``{{env.NAME}}`` placeholders on the way.
"""

from __future__ import annotations

import os
import re
from typing import Any

from .models import (
    AuthConfig,
    AuthType,
    Defaults,
    PrinterType,
    ReporterType,
    ServerConfig,
    Settings,
)


class SettingsParser:
    """Parses and converts validated YAML to a typed Settings structure."""

    # {{env.KEY}}
    TEMPLATE_PATTERN = re.compile(r"\{\{env\.(\w+)\}\}")

    def __init__(self, data: dict[str, Any], environ: dict[str, str] | None = None):
        self.data = data
        self.environ = os.environ if environ is None else environ
        self.env = data.get("env") or {}

    def parse(self) -> Settings:
        """Convert validated data to typed Settings."""
        return Settings(
            version=self.data["version"],
            name=self.data["name"],
            server=self._parse_server(),
            defaults=self._parse_defaults(),
            reporter=ReporterType(self.data.get("reporter", ReporterType.ASSERT.value)),
            printers=[PrinterType(p) for p in self.data.get("printers") or []],
            env=dict(self.env),
        )

    def interpolate(self, value: Any) -> Any:
        """Resolve {{env.KEY}} placeholders; unknown keys are left as is."""
        if isinstance(value, str):
            def replace_env(match: re.Match[str]) -> str:
                name = match.group(1)
                if name in self.env:
                    return str(self.env[name])
                return self.environ.get(name, match.group(0))
            return self.TEMPLATE_PATTERN.sub(replace_env, value)
        elif isinstance(value, dict):
            return {k: self.interpolate(v) for k, v in value.items()}
        elif isinstance(value, list):
            return [self.interpolate(v) for v in value]
        return value

    def _parse_server(self) -> ServerConfig:
        server = self.data["server"]
        return ServerConfig(
            url=self.interpolate(server["url"]),
            auth=self._parse_auth(server.get("auth")),
        )

    def _parse_auth(self, auth_data: dict | None) -> AuthConfig | None:
        """Parse auth configuration if present."""
        if auth_data is None:
            return None

        auth_data = self.interpolate(auth_data)
        return AuthConfig(
            type=AuthType(auth_data["type"]),
            token=auth_data.get("token"),
            header=auth_data.get("header", "X-API-Key"),
            key=auth_data.get("key"),
            username=auth_data.get("username"),
            password=auth_data.get("password"),
        )

    def _parse_defaults(self) -> Defaults:
        defaults = self.data.get("defaults") or {}
        return Defaults(
            timeout_ms=defaults.get("timeout_ms", 30000),
            headers=self.interpolate(defaults.get("headers") or {}),
        )
