"""Error Hierarchy — typed, categorized exceptions for every ULN failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Messages never contain the candidate value (learner numbers are personal data)
    - to_response() produces a JSON-serializable envelope
    - Invalid values subclass ValueError, wrong types subclass TypeError

Design Decisions:
    - Single hierarchy with ULNError base: callers catch one type for "any ULN failure"
    - Builtin mixins (ValueError/TypeError): callers that only know the stdlib still catch them
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    TYPE = "type"
    USAGE = "usage"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field_name: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


def describe_candidate(candidate: object) -> dict[str, Any]:
    """Debug info for a rejected candidate — its shape, never its content."""
    info: dict[str, Any] = {"candidate_type": type(candidate).__name__}
    if isinstance(candidate, str):
        info["candidate_length"] = len(candidate)
    return info


class ULNError(Exception):
    """Base exception for all ULN errors."""

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
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "field_name": self.context.field_name,
                    "debug_info": self.context.debug_info,
                },
            }
        }


# ─── Invalid Values ─────────────────────────────────────────────

class InvalidULNError(ULNError, ValueError):
    """String is not a valid ULN."""
    def __init__(
        self,
        message: str = "`value` is not a valid ULN value",
        code: str = "INVALID_ULN",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )


class ULNFormatError(InvalidULNError):
    """Candidate is not 9 digits followed by 1 check digit."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Invalid ULN format", "ULN_INVALID_FORMAT", context)


class ULNChecksumError(InvalidULNError):
    """Candidate is well-formed but its check digit does not verify."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "`value` is not a valid ULN value", "ULN_INVALID_CHECKSUM", context,
        )


# ─── Bad Arguments ──────────────────────────────────────────────

class ULNNullInputError(ULNError, ValueError):
    """None passed where a ULN or ULN string is required."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "`uln` cannot be None",
            "ULN_NULL_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )


class ULNTypeError(ULNError, TypeError):
    """Argument is neither a ULN nor a str."""
    def __init__(self, type_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"`uln` must be an instance of ULN or str, not {type_name}",
            "ULN_WRONG_TYPE", ErrorCategory.TYPE,
            ErrorSeverity.ERROR, context,
        )
        self.type_name = type_name


class ULNConstructionError(ULNError, TypeError):
    """ULN constructor called without the factory's private token."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "ULN objects cannot be constructed directly. Use `ULN.from_string()` instead.",
            "ULN_DIRECT_CONSTRUCTION", ErrorCategory.USAGE,
            ErrorSeverity.ERROR, context,
        )
