"""Error Hierarchy - typed, categorized exceptions for all message board failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - Upstream (Transform Service) failures never surface as unhandled exceptions
    - to_response() produces the REST envelope; no internal details in user-facing messages

Design Decisions:
    - Single hierarchy with MessageBoardError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - Upstream failures get their own statuses (502/504) instead of a generic 500
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from message_board.core.domain_types import TransformFailure


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    message_id: int | None = None
    upstream_url: str | None = None
    upstream_status: int | None = None
    attempts: int | None = None
    debug_info: dict[str, Any] | None = None


class MessageBoardError(Exception):
    """Base exception for all message board errors."""

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
                    "message_id": self.context.message_id,
                    "upstream_status": self.context.upstream_status,
                    "attempts": self.context.attempts,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class MessageValidationError(MessageBoardError):
    """Content rejected by the store; carries field-level details."""
    def __init__(
        self, details: list[dict[str, str]], context: ErrorContext | None = None,
    ):
        fields = ", ".join(sorted({d["field"] for d in details}))
        super().__init__(
            f"Message could not be saved: invalid {fields}",
            "VALIDATION_FAILED", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 422,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


class ResourceNotFoundError(MessageBoardError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(MessageBoardError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class TransformServiceError(MessageBoardError):
    """Transform Service unreachable, rejected the request, or answered garbage."""
    def __init__(
        self,
        message: str,
        failure: TransformFailure,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Transform service error ({failure.value}): {message}",
            "TRANSFORM_SERVICE_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
        self.failure = failure

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["failure"] = self.failure.value
        return response


class TransformTimeoutError(TransformServiceError):
    """Transform Service did not answer within the configured timeout."""
    def __init__(self, timeout_seconds: float, context: ErrorContext | None = None):
        super().__init__(
            f"no response within {timeout_seconds}s",
            TransformFailure.TIMEOUT, context,
        )
        self.code = "TRANSFORM_SERVICE_TIMEOUT"
        self.category = ErrorCategory.TIMEOUT
        self.http_status = 504
