"""
Settings Files

This package loads YAML settings files describing the API under test:
base URL, authentication, request defaults, reporter and printers.

Usage:
    from httpexpect.config import load_settings

    settings, result = load_settings("httpexpect.yaml")
    if not result.is_valid:
        print(result)  # Detailed error messages
    else:
        print(settings.server.url)
"""

# Models
from .models import (
    AuthConfig,
    AuthType,
    Defaults,
    PrinterType,
    ReporterType,
    ServerConfig,
    Settings,
)

# Validation
from .validation import SettingsValidator, ValidationError, ValidationResult

# Parser
from .parser import SettingsParser

# Loader functions
from .loader import load_settings, validate_settings_yaml

__all__ = [
    # Models
    "AuthConfig",
    "AuthType",
    "Defaults",
    "PrinterType",
    "ReporterType",
    "ServerConfig",
    "Settings",
    # Validation
    "SettingsValidator",
    "ValidationError",
    "ValidationResult",
    # Parser
    "SettingsParser",
    # Loader functions
    "load_settings",
    "validate_settings_yaml",
]
