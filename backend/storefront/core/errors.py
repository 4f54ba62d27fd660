"""Error Hierarchy — typed, categorized exceptions for all storefront failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (5xx) are critical
    - to_response() produces the REST envelope {"error": {...}}
    - No internal details leaked in user-facing messages
    - List store mutations never raise: absent ids are no-ops, not errors

Design Decisions:
    - Single hierarchy with StorefrontError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    DATA_INTEGRITY = "data_integrity"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    client_id: str | None = None
    storage_key: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None
    retry_after_ms: int | None = None


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "client_id": self.context.client_id,
                    "retry_after_ms": self.context.retry_after_ms,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidCursorError(StorefrontError):
    """Pagination cursor is not a non-negative decimal offset."""
    def __init__(self, cursor: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid pagination cursor: {cursor!r}",
            "INVALID_CURSOR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.cursor = cursor


class InvalidPageSizeError(StorefrontError):
    """Pagination limit below 1."""
    def __init__(self, limit: int, context: ErrorContext | None = None):
        super().__init__(
            f"Page size must be >= 1, got {limit}",
            "INVALID_PAGE_SIZE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.limit = limit


class ResourceNotFoundError(StorefrontError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class SnapshotCorruptedError(StorefrontError):
    """Persisted list snapshot could not be parsed or failed shape checks."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Persisted list snapshot is corrupted: {reason}",
            "SNAPSHOT_CORRUPTED", ErrorCategory.DATA_INTEGRITY,
            ErrorSeverity.WARNING, context, 422,
        )
        self.reason = reason


# ─── Infrastructure Errors (5xx) ────────────────────────────────

class DatabaseError(StorefrontError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class CatalogAPIError(StorefrontError):
    """Remote catalog API call failed."""
    def __init__(
        self,
        message: str,
        api_error_type: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Catalog API error ({api_error_type}): {message}",
            "CATALOG_API_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
        self.api_error_type = api_error_type
        self.status_code = status_code
