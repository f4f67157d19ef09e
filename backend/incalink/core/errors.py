"""Error Hierarchy - typed, categorized exceptions for all Incalink failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the REST envelope {"error": <message>}
    - Messages are fixed per operation; internal details never reach the client

Design Decisions:
    - Single hierarchy with IncalinkError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    OPERATION = "operation"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    group_id: int | None = None
    operation: str | None = None


class IncalinkError(Exception):
    """Base exception for all Incalink errors."""

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
        """Convert to the REST error body."""
        return {"error": self.message}


# --- Domain Errors (400-level) -----------------------------------

class GroupNotFoundError(IncalinkError):
    """No group exists with the requested id."""
    def __init__(self, group_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.group_id = group_id
        super().__init__(
            "Group not found", "RESOURCE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, ctx, 404,
        )
        self.group_id = group_id


# --- Infrastructure Errors (500-level) ---------------------------

class OperationFailedError(IncalinkError):
    """A group operation failed for any reason other than a missing record."""
    def __init__(
        self, message: str, operation: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            message, "OPERATION_FAILED", ErrorCategory.OPERATION,
            ErrorSeverity.ERROR, ctx, 500,
        )
        self.operation = operation


class DatabaseError(IncalinkError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
