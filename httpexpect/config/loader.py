"""
Settings loader.

This module provides the public API for loading and validating
settings files from disk or YAML strings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import Settings
from .parser import SettingsParser
from .validation import SettingsValidator, ValidationResult

logger = logging.getLogger(__name__)


def load_settings(path: str | Path) -> tuple[Settings | None, ValidationResult]:
    """
    Load and validate settings from a YAML file.

    Args:
        path: Path to the YAML settings file

    Returns:
        Tuple of (Settings or None, ValidationResult)
        If validation fails, Settings will be None.

    Example:
        settings, result = load_settings("httpexpect.yaml")
        if not result.is_valid:
            print(result)
            sys.exit(1)
        expect = Expect.from_settings(settings)
    """
    path = Path(path)

    if not path.exists():
        result = ValidationResult()
        result.add_error(
            str(path),
            "File not found",
            suggestion="Check the file path is correct"
        )
        return None, result

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error(
            str(path),
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)"
        )
        return None, result

    logger.debug(f"Loaded settings file {path}")
    return _validate_and_parse(data, str(path))


def validate_settings_yaml(yaml_string: str) -> tuple[Settings | None, ValidationResult]:
    """
    Validate settings from a YAML string (useful for testing).

    Args:
        yaml_string: YAML content as a string

    Returns:
        Tuple of (Settings or None, ValidationResult)
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error("yaml", f"Invalid YAML syntax: {e}")
        return None, result

    return _validate_and_parse(data, "yaml")


def _validate_and_parse(data: Any, source: str) -> tuple[Settings | None, ValidationResult]:
    if not isinstance(data, dict):
        result = ValidationResult()
        result.add_error(
            source,
            "Content must be a YAML object (not a list or scalar)",
            value=type(data).__name__
        )
        return None, result

    validator = SettingsValidator(data)
    result = validator.validate()

    if not result.is_valid:
        logger.warning(f"Settings from {source} failed validation with {len(result.errors)} error(s)")
        return None, result

    parser = SettingsParser(data)
    return parser.parse(), result
