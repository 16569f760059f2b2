"""Error Hierarchy — typed, categorized exceptions for every library failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are raised where the rule is checked and never caught
      before the global handler; infrastructure errors (409/503) come from the store
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with LibraryError base: one FastAPI handler catches all (ADR: uniform error shape)
    - DuplicateRecordError subclasses InvalidDataError: a duplicate key is rejected
      data, callers that only care about "invalid" need a single except clause
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: str | None = None
    debug_info: dict[str, Any] | None = None


class LibraryError(Exception):
    """Base exception for all library service errors."""

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

    def to_response(self, path: str | None = None) -> dict:
        """Convert to standardized REST error response."""
        body = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        if path is not None:
            body["path"] = path
        return {"error": body}


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidDataError(LibraryError):
    """A domain rule was violated (missing field, bad range, wrong state)."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_DATA", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field

    def to_response(self, path: str | None = None) -> dict:
        response = super().to_response(path)
        if self.field:
            response["error"]["field"] = self.field
        return response


class DuplicateRecordError(InvalidDataError):
    """A unique key already belongs to another record of the same entity."""
    def __init__(
        self, entity: str, field: str, value: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{entity} with {field} '{value}' already exists", field, context,
        )
        self.code = "DUPLICATE_RECORD"
        self.entity = entity
        self.value = value


class ResourceNotFoundError(LibraryError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object,
        key: str = "id", context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found with {key}: {resource_id}",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (409/503) ────────────────────────────

class DataConflictError(LibraryError):
    """The store rejected a write on a unique, foreign-key or not-null constraint."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "DATA_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class DatabaseError(LibraryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


def classify_integrity_violation(raw_message: str | None) -> str:
    """Best-effort, caller-safe description of a driver integrity error."""
    text = raw_message or ""
    lowered = text.lower()
    if "unique" in lowered or "duplicate key" in lowered:
        return (
            "A record with these unique values already exists "
            "(tax id, registration number, employee code or email)"
        )
    if "foreign key" in lowered or "FK" in text:
        return "Operation not allowed because of existing relationships"
    if "not null" in lowered or "not-null" in lowered or "NULL" in text:
        return "Required fields were not provided"
    return "Data integrity violation"
