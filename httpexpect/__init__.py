"""
httpexpect - Fluent assertions for HTTP APIs

This package builds requests, sends them through a transport, and
exposes chained assertion wrappers over responses and JSON values.

Subpackages:
    - assertions: Chain, canonical form, and the value wrappers
    - reporting: Reporter interface, stock reporters and run reports
    - transport: aiohttp client and in-process application transports
    - config: Parse and validate YAML settings files

Usage:
    from httpexpect import AssertReporter, Config, Expect

    reporter = AssertReporter()
    config = Config(reporter=reporter, base_url="http://localhost:8080")

    async with Expect(config) as e:
        response = await e.get("/fruits").expect()
        response.status(200).json().array().contains_only("apple", "orange")

    reporter.verify()
"""

__version__ = "0.1.0"

# Re-export assertions for convenience
from .assertions import (
    # Chain and canonical form
    Chain,
    Canonical,
    Kind,
    canon_equal,
    canon_value,
    format_value,
    # Wrappers
    Array,
    Boolean,
    Null,
    Number,
    Object,
    String,
    Value,
)

# Re-export reporting for convenience
from .reporting import (
    # Models
    FailureRecord,
    RunReport,
    RunStatus,
    # Reporters
    AssertReporter,
    ExpectationError,
    LoggingReporter,
    Reporter,
    RequireReporter,
)

# Re-export transport for convenience
from .transport import (
    # Factory
    create_transport,
    # Implementations
    AppTransport,
    BaseTransport,
    HTTPTransport,
    # Models
    HTTPRequest,
    HTTPResponse,
    TransportError,
    TransportErrorCode,
)

# Re-export config for convenience
from .config import (
    load_settings,
    validate_settings_yaml,
    Settings,
    ValidationResult,
)

# Printers
from .printers import CompactPrinter, CurlPrinter, DebugPrinter, Printer

# Requests and responses
from .expect import Config, Expect
from .request import Request
from .response import Response

__all__ = [
    # Package info
    "__version__",
    # Assertions - Chain and canonical form
    "Chain",
    "Canonical",
    "Kind",
    "canon_equal",
    "canon_value",
    "format_value",
    # Assertions - Wrappers
    "Array",
    "Boolean",
    "Null",
    "Number",
    "Object",
    "String",
    "Value",
    # Reporting - Models
    "FailureRecord",
    "RunReport",
    "RunStatus",
    # Reporting - Reporters
    "AssertReporter",
    "ExpectationError",
    "LoggingReporter",
    "Reporter",
    "RequireReporter",
    # Transport - Factory
    "create_transport",
    # Transport - Implementations
    "AppTransport",
    "BaseTransport",
    "HTTPTransport",
    # Transport - Models
    "HTTPRequest",
    "HTTPResponse",
    "TransportError",
    "TransportErrorCode",
    # Config
    "load_settings",
    "validate_settings_yaml",
    "Settings",
    "ValidationResult",
    # Printers
    "CompactPrinter",
    "CurlPrinter",
    "DebugPrinter",
    "Printer",
    # Requests and responses
    "Config",
    "Expect",
    "Request",
    "Response",
]
