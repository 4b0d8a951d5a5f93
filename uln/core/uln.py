"""ULN Value Object — the validated, immutable Unique Learner Number.

Invariants:
    - Every ULN instance in existence has passed checksum validation
    - __init__ only accepts the module-private token: ULN.from_string is the single entry point
    - Subclasses cannot define __init__ or __new__, so the token check always runs
    - Instances are immutable: attribute assignment and deletion raise AttributeError
    - Equality is nominal: a non-ULN is never equal, whatever its fields
    - str() and repr() read the runtime class name, so subclasses render their own name
    - Rejections logged at DEBUG with shape only (length, type), never the candidate itself

Design Decisions:
    - is_valid keeps raise-on-format / False-on-checksum: callers depend on the split;
      core.checksum.classify is the non-raising tagged alternative
    - require_valid returns str input unchanged (not wrapped): usable as a guard in
      constructors of consuming types that store either representation
    - __slots__ + blocked __setattr__ over frozen dataclass: a dataclass __init__ is public
    - Pickle reduces through from_string: unpickled instances are re-validated
"""

import logging

from uln.core.checksum import classify
from uln.core.domain_types import ULNValue, ValidationOutcome
from uln.core.errors import (
    ErrorContext,
    ULNChecksumError,
    ULNConstructionError,
    ULNError,
    ULNFormatError,
    ULNNullInputError,
    ULNTypeError,
    describe_candidate,
)

logger = logging.getLogger(__name__)

_PRIVATE_TOKEN = object()


def _reject(error: ULNError, candidate: object) -> ULNError:
    """Attach candidate shape to the error and log it. Returns the error for raising."""
    error.context.field_name = error.context.field_name or "uln"
    error.context.debug_info = describe_candidate(candidate)
    logger.debug(
        f"ULN candidate rejected: {error.code}",
        extra={
            "error_code": error.code,
            "candidate_length": error.context.debug_info.get("candidate_length"),
        },
    )
    return error


class ULN:
    """A 10-digit Unique Learner Number (ULN).

    Issued by the Learning Records Service:
    https://www.gov.uk/education/learning-records-service-lrs

    Build instances with ULN.from_string(); the constructor is private.
    """

    __slots__ = ("_value",)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for name in ("__init__", "__new__"):
            if name in cls.__dict__:
                raise TypeError(
                    f"{cls.__name__} cannot override {name}: "
                    "ULN instances are only built by ULN.from_string()"
                )

    def __init__(self, token: object, value: str):
        if token is not _PRIVATE_TOKEN:
            raise ULNConstructionError(ErrorContext(field_name="token"))
        object.__setattr__(self, "_value", ULNValue(value))

    # ─── Factory & Validation ────────────────────────────────────

    @classmethod
    def from_string(cls, value: str) -> "ULN":
        """Create a ULN from a 10-digit string, raising if it is not valid."""
        validated = cls.require_valid(value)
        if isinstance(validated, cls):
            return validated
        if isinstance(validated, ULN):
            return cls(_PRIVATE_TOKEN, validated.value)
        return cls(_PRIVATE_TOKEN, validated)

    @staticmethod
    def is_valid(value: str) -> bool:
        """True if the check digit verifies.

        Raises ULNFormatError when value is not 9 digits followed by a check
        digit. A well-formed value whose weighted sum leaves remainder 0 is
        not valid.
        """
        if not isinstance(value, str):
            raise _reject(ULNTypeError(type(value).__name__), value)

        outcome = classify(value)
        if outcome is ValidationOutcome.INVALID_FORMAT:
            raise _reject(ULNFormatError(), value)
        return outcome is ValidationOutcome.VALID

    @staticmethod
    def require_valid(uln_or_value: "ULN | str") -> "ULN | str":
        """Return the argument unchanged if it is a ULN or a valid ULN string.

        Raises:
            ULNNullInputError: argument is None
            ULNFormatError: string is not 10 digits
            ULNChecksumError: string is 10 digits but the check digit is wrong
            ULNTypeError: argument is neither a ULN nor a str
        """
        if uln_or_value is None:
            raise _reject(ULNNullInputError(), uln_or_value)

        if isinstance(uln_or_value, ULN):
            return uln_or_value

        if not isinstance(uln_or_value, str):
            raise _reject(ULNTypeError(type(uln_or_value).__name__), uln_or_value)

        if not ULN.is_valid(uln_or_value):
            raise _reject(ULNChecksumError(), uln_or_value)

        return uln_or_value

    # ─── Value Semantics ─────────────────────────────────────────

    @property
    def value(self) -> ULNValue:
        return self._value

    def equals(self, other: object) -> bool:
        """True if other is a ULN wrapping the same value."""
        if self is other:
            return True
        return isinstance(other, ULN) and self._value == other._value

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __repr__(self) -> str:
        return str(self)

    # ─── Immutability ────────────────────────────────────────────

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    def __copy__(self) -> "ULN":
        return self

    def __deepcopy__(self, memo: dict) -> "ULN":
        return self

    def __reduce__(self):
        return (type(self).from_string, (self._value,))
