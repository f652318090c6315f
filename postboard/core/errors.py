"""Error Hierarchy — typed, categorized exceptions for all Postboard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - No internal details leaked: HTTP responses carry the status code only

Design Decisions:
    - Single hierarchy with PostboardError base: FastAPI global handler catches all
    - Not-found is not an exception: the repository returns None, handlers answer 404
"""

from dataclasses import dataclass, field
from enum import Enum
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
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context attached to an error for log records."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None


class PostboardError(Exception):
    """Base exception for all Postboard errors."""

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
        """Fields for logger.*(extra=...); never sent to the client."""
        return {
            "error_code": self.code,
            "operation": self.context.operation,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ParameterValidationError(PostboardError):
    """A required query parameter is missing or malformed."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PostboardError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
