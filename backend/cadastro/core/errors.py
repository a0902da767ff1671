"""Error Hierarchy — typed, categorized exceptions for every registration failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) are recoverable; storage errors (500) are critical
    - to_response() exposes only {"message": ...} — codes and categories stay in logs
    - StorageError never carries driver detail in its message

Design Decisions:
    - Single hierarchy with CadastroError base: one FastAPI handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: observability data travels with the error,
      without coupling to the logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


GENERIC_SERVER_ERROR_MESSAGE = "Internal server error."


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    registrant_id: int | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class CadastroError(Exception):
    """Base exception for all Cadastro errors."""

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
        """Convert to the client-facing error body."""
        return {"message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class RegistrationValidationError(CadastroError):
    """Registration payload broke a field rule."""
    def __init__(self, message: str, field: str | None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.field = field


class DuplicateEmailError(CadastroError):
    """Email already belongs to a registrant."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__(
            "This email is already registered.",
            "DUPLICATE_EMAIL", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )
        self.email = email


class ResourceNotFoundError(CadastroError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(CadastroError):
    """Database operation failed. Detail is for logs only."""
    def __init__(self, operation: str, detail: str, context: ErrorContext | None = None):
        super().__init__(
            GENERIC_SERVER_ERROR_MESSAGE,
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
        self.detail = detail
