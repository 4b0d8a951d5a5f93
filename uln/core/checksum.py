"""ULN Checksum — pure format match and check-digit computation.

Invariants:
    - All functions are PURE: no IO, no logging, no raising for str input
    - Pattern applied with fullmatch: ASCII digits only, no trailing newline
    - Weight for payload digit i (zero-based) is FIRST_WEIGHT - i, i.e. 10 down to 2
    - remainder == 0 has no valid check digit — classified INVALID_CHECKSUM, never INVALID_FORMAT

Design Decisions:
    - classify() returns a tagged ValidationOutcome: single result type,
      the raise-vs-return split of ULN.is_valid lives in the shell around it
    - [0-9] over \\d: \\d matches non-ASCII digits under re.UNICODE
"""

import re

from uln.core.domain_types import (
    CHECKSUM_MODULUS,
    FIRST_WEIGHT,
    PAYLOAD_LENGTH,
    ValidationOutcome,
)


ULN_PATTERN = re.compile(
    rf"(?P<digits>[0-9]{{{PAYLOAD_LENGTH}}})(?P<check_digit>[0-9])"
)


def calculate_weighted_sum(digits: str) -> int:
    """Sum of each payload digit times its weight (10 for the first, 2 for the ninth)."""
    return sum(
        (FIRST_WEIGHT - i) * int(digit) for i, digit in enumerate(digits)
    )


def expected_check_digit(digits: str) -> int | None:
    """Check digit the payload requires, or None when the remainder is 0."""
    remainder = calculate_weighted_sum(digits) % CHECKSUM_MODULUS
    if remainder == 0:
        return None
    return 10 - remainder


def classify(candidate: str) -> ValidationOutcome:
    """Classify a candidate string. Pure — never raises for str input."""
    match = ULN_PATTERN.fullmatch(candidate)
    if match is None:
        return ValidationOutcome.INVALID_FORMAT

    expected = expected_check_digit(match.group("digits"))
    if expected is None or expected != int(match.group("check_digit")):
        return ValidationOutcome.INVALID_CHECKSUM

    return ValidationOutcome.VALID
