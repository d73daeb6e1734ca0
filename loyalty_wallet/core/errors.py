"""Error Hierarchy — typed, categorized exceptions for all wallet failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Store errors are raised; encoder errors are carried inside an EncodeResult
    - to_response() produces the envelope the presentation layer consumes
    - No internal details leaked in user-facing messages (cause kept on the object only)

Design Decisions:
    - Single hierarchy with WalletError base: one except clause catches every domain failure
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
    EXTERNAL_LIBRARY = "external_library"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    card_id: str | None = None
    symbology: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class WalletError(Exception):
    """Base exception for all wallet errors."""

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

    @property
    def recoverable(self) -> bool:
        return self.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)

    def to_response(self) -> dict:
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "card_id": self.context.card_id,
                    "symbology": self.context.symbology,
                },
            }
        }


# ─── Card Store Errors ──────────────────────────────────────────

class CardNotFoundError(WalletError):
    """Rename/delete/lookup target is not in the store."""
    def __init__(self, target: str, context: ErrorContext | None = None):
        super().__init__(
            f"Card '{target}' not found",
            "CARD_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context,
        )
        self.target = target


class CardValidationError(WalletError):
    """Card field failed validation (blank name, duplicate id)."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CARD_VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.field = field


# ─── Barcode Errors ─────────────────────────────────────────────

class UnsupportedSymbologyError(WalletError):
    """Barcode type outside the supported set."""
    def __init__(self, symbology: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.symbology = symbology
        super().__init__(
            f"Unsupported symbology: {symbology!r}",
            "UNSUPPORTED_SYMBOLOGY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.symbology = symbology


class InvalidPayloadError(WalletError):
    """Payload is malformed for the chosen symbology."""
    def __init__(
        self, message: str, symbology: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.symbology = symbology
        super().__init__(
            message, "INVALID_PAYLOAD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.symbology = symbology


class EncodingFailure(WalletError):
    """Underlying barcode library failed. Keeps the lower-level cause."""
    def __init__(
        self,
        symbology: str,
        cause: BaseException,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.symbology = symbology
        ctx.user_message = ctx.user_message or "Barcode could not be generated"
        super().__init__(
            f"Encoding {symbology} failed ({type(cause).__name__}): {cause}",
            "ENCODING_FAILURE", ErrorCategory.EXTERNAL_LIBRARY,
            ErrorSeverity.ERROR, ctx,
        )
        self.symbology = symbology
        self.cause = cause
