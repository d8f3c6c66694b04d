"""Error Hierarchy — typed, categorized exceptions for all Pairwork failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope consumed by the global handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PairworkError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Route handlers never catch these; failures propagate to api/error_handlers.py
"""

from dataclasses import dataclass, field
from enum import Enum
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
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    resource_id: str | None = None
    principal_id: str | None = None


class PairworkError(Exception):
    """Base exception for all Pairwork errors."""

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
                    "resource": self.context.resource,
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(PairworkError):
    """Requested document does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class NotOwnerError(PairworkError):
    """Principal attempted to modify a document owned by someone else."""
    def __init__(
        self, resource_type: str, resource_id: str, principal_id: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        ctx.resource_id = resource_id
        ctx.principal_id = principal_id
        super().__init__(
            f"The client does not own this {resource_type}",
            "NOT_OWNER", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, ctx, 401,
        )


class NotParticipantError(PairworkError):
    """Update payload does not match either participant of a two-party document."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"You are not involved in this {resource_type}",
            "NOT_PARTICIPANT", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, ctx, 403,
        )


class AuthenticationError(PairworkError):
    """Bearer credential missing, malformed, or rejected."""
    def __init__(self, message: str = "A valid bearer token is required",
                 context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class DuplicateValueError(PairworkError):
    """Unique field already taken by another document."""
    def __init__(self, resource_type: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        super().__init__(
            f"A {resource_type} with the same unique value already exists",
            "DUPLICATE_VALUE", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )


class ConstraintViolationError(PairworkError):
    """Write rejected by a non-unique storage constraint (NOT NULL, CHECK)."""
    def __init__(self, resource_type: str, resource_id: str | None = None,
                 context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"The {resource_type} payload violates a required-field constraint",
            "CONSTRAINT_VIOLATION", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PairworkError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
