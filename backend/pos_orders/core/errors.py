"""Error Hierarchy — typed, categorized exceptions for every order-layer failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Store failures always carry the original driver exception as __cause__
    - to_response() produces the envelope handed to the presentation layer

Design Decisions:
    - Single hierarchy with PosError base: callers catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    DATA_INTEGRITY = "data_integrity"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    order_id: int | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class PosError(Exception):
    """Base exception for all order-layer errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to the standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "order_id": self.context.order_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class OrderValidationError(PosError):
    """Order input rejected before reaching the store."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "ORDER_VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.field = field


class OrderNotFoundError(PosError):
    """Requested order identity has no corresponding row."""
    def __init__(self, order_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.order_id = order_id
        super().__init__(
            "Order not found", "ORDER_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.ERROR, ctx,
        )
        self.order_id = order_id


class MalformedOrderDataError(PosError):
    """Stored rows could not be shaped into a read model (e.g. quantity <= 0)."""
    def __init__(
        self, detail: str, order_id: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.order_id = ctx.order_id or order_id
        super().__init__(
            "Stored order data failed validation", "MALFORMED_ORDER_DATA",
            ErrorCategory.DATA_INTEGRITY, ErrorSeverity.ERROR, ctx,
        )
        self.detail = detail
        self.order_id = order_id


class OrderNotPersistedError(PosError):
    """Insert completed but the store handed back no identity."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Failed to retrieve order identity after insert",
            "ORDER_NOT_PERSISTED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context,
        )


# ─── Infrastructure Errors ──────────────────────────────────────

class StoreExecutionError(PosError):
    """Store statement failed (connectivity, constraint violation, malformed SQL)."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.operation = operation
