"""Error Hierarchy: typed, categorized exceptions for all tool server failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Tool-level errors never escape ToolDispatch.execute (converted to envelopes there)
    - to_response() produces the REST envelope; raw backend text stays in logs only

Design Decisions:
    - Single hierarchy with BaasToolError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFIGURATION = "configuration"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tool_name: str | None = None
    backend_call: str | None = None
    debug_info: dict[str, Any] | None = None


class BaasToolError(Exception):
    """Base exception for all tool server errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "tool_name": self.context.tool_name,
                    "backend_call": self.context.backend_call,
                },
            }
        }


# ─── Tool Errors (400-level) ────────────────────────────────────

class ToolValidationError(BaasToolError):
    """Tool arguments failed the input schema."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class UnknownToolError(BaasToolError):
    """Caller referenced a tool name that is not registered."""
    def __init__(self, tool_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown tool: {tool_name}",
            "UNKNOWN_TOOL", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.tool_name = tool_name


# ─── Startup Errors ─────────────────────────────────────────────

class ToolRegistrationError(BaasToolError):
    """Catalogue construction failed: duplicate name or frozen registry."""
    def __init__(self, message: str, tool_name: str):
        super().__init__(
            message, "TOOL_REGISTRATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, ErrorContext(tool_name=tool_name), 500,
        )
        self.tool_name = tool_name


# ─── Infrastructure Errors (500-level) ──────────────────────────

class BaasAPIError(BaasToolError):
    """Meeting BaaS API call failed."""
    def __init__(
        self,
        message: str,
        api_error_type: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Meeting BaaS API error ({api_error_type}): {message}",
            "BAAS_API_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
        self.api_error_type = api_error_type
        self.status_code = status_code
