"""ULN — validated value type for the UK Unique Learner Number.

Invariants:
    - Importing the package configures nothing (no logging handlers, no settings load)
    - Public names re-exported here are the supported API surface

Design Decisions:
    - Re-exports over star imports: explicit names only
"""

from uln.core.checksum import classify
from uln.core.domain_types import ValidationOutcome
from uln.core.errors import (
    InvalidULNError,
    ULNChecksumError,
    ULNConstructionError,
    ULNError,
    ULNFormatError,
    ULNNullInputError,
    ULNTypeError,
)
from uln.core.uln import ULN
from uln.schemas.uln_field import ULNField

__version__ = "1.0.0"

__all__ = [
    "ULN",
    "ULNField",
    "ValidationOutcome",
    "classify",
    "ULNError",
    "InvalidULNError",
    "ULNFormatError",
    "ULNChecksumError",
    "ULNNullInputError",
    "ULNTypeError",
    "ULNConstructionError",
]
