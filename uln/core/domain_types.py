"""Domain Types — rich types and constants for the Unique Learner Number.

Invariants:
    - ULNValue wraps a str that has already passed checksum validation
    - PAYLOAD_LENGTH (9) payload digits precede the single check digit
    - CHECKSUM_MODULUS (11) is single source of truth for the modulus
    - All validation outcomes encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrapper for the raw value: zero runtime cost, full type-checker support
    - str Enum for ValidationOutcome: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

ULNValue = NewType("ULNValue", str)     # 10 ASCII digits, checksum verified


# ─── Constants ───────────────────────────────────────────────────

PAYLOAD_LENGTH: int = 9
CHECKSUM_MODULUS: int = 11
FIRST_WEIGHT: int = 10                  # weights run 10 down to 2


# ─── Enums ───────────────────────────────────────────────────────

class ValidationOutcome(str, Enum):
    """Tagged result of classifying a candidate string."""
    VALID = "valid"
    INVALID_CHECKSUM = "invalid_checksum"
    INVALID_FORMAT = "invalid_format"

    @property
    def is_valid(self) -> bool:
        return self is ValidationOutcome.VALID
