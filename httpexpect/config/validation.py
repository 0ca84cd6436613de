"""
Validation for settings files.

This module contains the validation logic that checks raw parsed YAML
against the settings schema and reports errors with helpful messages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .models import AuthType, PrinterType, ReporterType


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "server.auth.token"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of settings validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Settings validation passed"
        lines = [f"Settings validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Settings Validator
# ─────────────────────────────────────────────────────────────────────────────

class SettingsValidator:
    """Validates raw parsed YAML against the settings schema."""

    REQUIRED_TOP_LEVEL = {"version", "name", "server"}
    OPTIONAL_TOP_LEVEL = {"defaults", "reporter", "printers", "env"}
    VALID_REPORTERS = {t.value for t in ReporterType}
    VALID_PRINTERS = {t.value for t in PrinterType}
    VALID_AUTH_TYPES = {t.value for t in AuthType}

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        self._validate_name()
        self._validate_server()
        self._validate_defaults()
        self._validate_reporter()
        self._validate_printers()
        self._validate_env()

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your settings file"
            )

        for key in sorted(unknown):
            self.result.add_error(
                key,
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}"
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            self.result.add_error(
                "version",
                "Must be an integer",
                value=version,
                suggestion="Use 'version: 1'"
            )
        elif version < 1:
            self.result.add_error(
                "version",
                "Must be >= 1",
                value=version
            )

    def _validate_name(self) -> None:
        name = self.data.get("name")
        if not isinstance(name, str):
            self.result.add_error(
                "name",
                "Must be a string",
                value=name
            )
        elif not name.strip():
            self.result.add_error(
                "name",
                "Cannot be empty",
                suggestion="Provide a descriptive name for the API under test"
            )

    def _validate_server(self) -> None:
        server = self.data.get("server")
        if not isinstance(server, dict):
            self.result.add_error(
                "server",
                "Must be an object",
                value=server
            )
            return

        url = server.get("url")
        if not url:
            self.result.add_error(
                "server.url",
                "Required field",
                suggestion="Add 'url: \"http://...\"' to server config"
            )
        elif not isinstance(url, str):
            self.result.add_error(
                "server.url",
                "Must be a string",
                value=url
            )
        elif not (url.startswith("http://") or url.startswith("https://")):
            self.result.add_error(
                "server.url",
                "Must be a valid HTTP(S) URL",
                value=url,
                suggestion="URL should start with 'http://' or 'https://'"
            )

        auth = server.get("auth")
        if auth is not None:
            self._validate_auth(auth)

    def _validate_defaults(self) -> None:
        defaults = self.data.get("defaults")
        if defaults is None:
            return
        if not isinstance(defaults, dict):
            self.result.add_error(
                "defaults",
                "Must be an object",
                value=defaults
            )
            return

        timeout = defaults.get("timeout_ms")
        if timeout is not None:
            if not isinstance(timeout, int) or isinstance(timeout, bool) or timeout < 0:
                self.result.add_error(
                    "defaults.timeout_ms",
                    "Must be a non-negative integer (milliseconds)",
                    value=timeout
                )

        headers = defaults.get("headers")
        if headers is not None:
            if not isinstance(headers, dict):
                self.result.add_error(
                    "defaults.headers",
                    "Must be an object (header name to value)",
                    value=headers
                )
                return
            for name, value in headers.items():
                if not isinstance(value, str):
                    self.result.add_error(
                        f"defaults.headers.{name}",
                        "Header value must be a string",
                        value=value,
                        suggestion="Quote the value in YAML"
                    )

    def _validate_reporter(self) -> None:
        reporter = self.data.get("reporter")
        if reporter is None:
            return
        if reporter not in self.VALID_REPORTERS:
            self.result.add_error(
                "reporter",
                "Invalid reporter type",
                value=reporter,
                suggestion=f"Valid reporters: {', '.join(sorted(self.VALID_REPORTERS))}"
            )

    def _validate_printers(self) -> None:
        printers = self.data.get("printers")
        if printers is None:
            return
        if not isinstance(printers, list):
            self.result.add_error(
                "printers",
                "Must be a list",
                value=printers,
                suggestion="Use 'printers: [compact]'"
            )
            return
        for i, printer in enumerate(printers):
            if printer not in self.VALID_PRINTERS:
                self.result.add_error(
                    f"printers[{i}]",
                    "Invalid printer type",
                    value=printer,
                    suggestion=f"Valid printers: {', '.join(sorted(self.VALID_PRINTERS))}"
                )

    def _validate_env(self) -> None:
        env = self.data.get("env")
        if env is None:
            return
        if not isinstance(env, dict):
            self.result.add_error(
                "env",
                "Must be an object (key-value pairs)",
                value=env
            )

    def _validate_auth(self, auth: Any) -> None:
        """Validate auth configuration for HTTP transport."""
        if not isinstance(auth, dict):
            self.result.add_error(
                "server.auth",
                "Must be an object",
                value=auth
            )
            return

        auth_type = auth.get("type")
        if auth_type not in self.VALID_AUTH_TYPES:
            self.result.add_error(
                "server.auth.type",
                "Invalid auth type",
                value=auth_type,
                suggestion=f"Valid types: {', '.join(sorted(self.VALID_AUTH_TYPES))}"
            )
            return

        if auth_type == "bearer":
            self._require_string(auth, "token", "bearer")

        elif auth_type == "api_key":
            self._require_string(auth, "key", "api_key")
            header = auth.get("header")
            if header is not None and not isinstance(header, str):
                self.result.add_error(
                    "server.auth.header",
                    "Must be a string",
                    value=header,
                    suggestion="Default is 'X-API-Key'"
                )

        elif auth_type == "basic":
            self._require_string(auth, "username", "basic")
            self._require_string(auth, "password", "basic")

    def _require_string(self, auth: dict[str, Any], name: str, auth_type: str) -> None:
        value = auth.get(name)
        if not value:
            self.result.add_error(
                f"server.auth.{name}",
                f"Required for {auth_type} auth",
                suggestion=f"Add '{name}: \"...\"' or '{name}: \"{{{{env.{name.upper()}}}}}\"'"
            )
        elif not isinstance(value, str):
            self.result.add_error(
                f"server.auth.{name}",
                "Must be a string",
                value=value
            )
