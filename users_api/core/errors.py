"""Error Hierarchy: typed, categorized exceptions for all Users API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are raised before any persistence call;
      infrastructure errors (500-level) are critical
    - public_message is the only text ever sent to the client (plain text, no envelope)
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with UsersApiError base: one global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    SERIALIZATION = "serialization"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    operation: str | None = None


class UsersApiError(Exception):
    """Base exception for all Users API errors."""

    public_message = "Internal Server Error"

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

    def to_log_extra(self) -> dict:
        """Fields attached to the log record when this error is handled."""
        return {
            "error_code": self.code,
            "category": self.category.value,
            "user_id": self.context.user_id,
            "operation": self.context.operation,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class MalformedInputError(UsersApiError):
    """An id or form field could not be parsed."""

    public_message = "Bad Request"

    def __init__(self, field: str, value: object, context: ErrorContext | None = None):
        super().__init__(
            f"Malformed value for '{field}': {value!r}",
            "MALFORMED_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field
        self.value = value


class ResourceNotFoundError(UsersApiError):
    """Requested resource does not exist."""

    public_message = "User not found"

    def __init__(
        self, resource_type: str, resource_id: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UsersApiError):
    """Database operation failed (connection, query, constraint)."""

    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class SerializationError(UsersApiError):
    """Response body could not be encoded.

    Raised after any mutation has already been committed; it never implies a rollback.
    """

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Serialization failed: {message}",
            "SERIALIZATION_ERROR", ErrorCategory.SERIALIZATION,
            ErrorSeverity.ERROR, context, 500,
        )
