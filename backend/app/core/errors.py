"""Error Hierarchy — typed, categorized exceptions for all Benefits API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope: {"success": false, "error": {...}}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BenefitsError base: one FastAPI handler maps every kind
      to its status, no message matching
    - ErrorContext as dataclass: observability fields without coupling to logging
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    benefit_id: int | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class BenefitsError(Exception):
    """Base exception for all Benefits API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: list[str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details or []

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        error = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        if self.details:
            error["details"] = self.details
        return {"success": False, "error": error}


# ─── Domain Errors (400-level) ──────────────────────────────────

class BenefitValidationError(BenefitsError):
    """Benefit data breaks one or more business rules."""
    def __init__(self, errors: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Invalid benefit: {', '.join(errors)}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400, details=errors,
        )
        self.errors = errors


class InvalidIdError(BenefitsError):
    """Identifier is not a positive integer within the storage range."""
    def __init__(self, value: object, context: ErrorContext | None = None):
        super().__init__(
            "Invalid ID", "INVALID_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.value = value


class DuplicateNameError(BenefitsError):
    """Another benefit already uses this name."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(
            f"A benefit named '{name}' already exists",
            "DUPLICATE_NAME", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 400,
        )
        self.name = name


class ResourceNotFoundError(BenefitsError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(BenefitsError):
    """Backing store unreachable or rejected the operation."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Storage {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation


class DeleteFailedError(BenefitsError):
    """Row existed on lookup but the delete removed nothing."""
    def __init__(self, benefit_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.benefit_id = benefit_id
        super().__init__(
            f"Failed to delete benefit '{benefit_id}'",
            "DELETE_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
