"""Error Hierarchy — typed, categorized exceptions for all relay failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Payload errors (400-level) are the caller's fault; model errors (500-level) are not
    - to_response() produces the flat JSON envelope the dashboard reads ({error, ...})

Design Decisions:
    - Single hierarchy with RelayError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ModelCallFailure doubles as a value: the adapter returns it inside Result.err
      and the relay handler raises it (ADR: no exceptions across the adapter boundary)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    route: str | None = None
    debug_info: dict[str, Any] | None = None


class RelayError(Exception):
    """Base exception for all relay errors."""

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
        """Convert to the dashboard's error envelope."""
        return {"error": self.message}


# ─── Payload Errors (400-level) ─────────────────────────────────

class PayloadValidationError(RelayError):
    """Required request field(s) missing or empty."""
    def __init__(self, missing_fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Missing required field(s): {', '.join(missing_fields)}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.missing_fields = missing_fields


class InvalidFieldError(PayloadValidationError):
    """Required field present but shaped so it cannot be rendered."""
    def __init__(self, field: str, reason: str, context: ErrorContext | None = None):
        super().__init__([field], context)
        self.message = f"Invalid field {field}: {reason}"
        self.args = (self.message,)
        self.field = field
        self.reason = reason


class MalformedBodyError(RelayError):
    """Request body is not valid JSON."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Request body is not valid JSON: {reason}",
            "MALFORMED_BODY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class PayloadTooLargeError(RelayError):
    """Request body exceeds the configured size limit."""
    def __init__(self, limit_bytes: int, context: ErrorContext | None = None):
        super().__init__(
            f"Request body exceeds {limit_bytes} bytes",
            "PAYLOAD_TOO_LARGE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 413,
        )
        self.limit_bytes = limit_bytes


# ─── External Errors (500-level) ────────────────────────────────

class ModelCallFailure(RelayError):
    """Gemini call failed, timed out, or returned no usable text."""
    def __init__(
        self,
        message: str,
        provider_detail: str | None = None,
        public_message: str = "Failed to get a response from Gemini.",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "MODEL_CALL_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.provider_detail = provider_detail
        self.public_message = public_message

    def for_route(self, public_message: str, route: str) -> "ModelCallFailure":
        """Copy with the route's user-facing message attached."""
        return ModelCallFailure(
            self.message,
            provider_detail=self.provider_detail,
            public_message=public_message,
            context=ErrorContext(
                timestamp=self.context.timestamp, route=route,
                debug_info=self.context.debug_info,
            ),
        )

    def to_response(self) -> dict:
        body = {"error": self.public_message, "details": self.message}
        if self.provider_detail is not None:
            body["geminiErrorDetail"] = self.provider_detail
        return body
