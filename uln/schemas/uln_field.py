"""ULN Field — pydantic Annotated type that validates ULNs at model boundaries.

Invariants:
    - Accepts a ULN instance or a valid 10-digit str; the model attribute is always a ULN
    - Every ULNError surfaces as pydantic ValidationError, error type == lower-cased ULN error code
    - Serializes to the bare 10-digit string in python and JSON mode

Design Decisions:
    - Annotated metadata over __get_pydantic_core_schema__ on ULN: core stays free of pydantic
    - PydanticCustomError over re-raising: ULNTypeError is a TypeError, which pydantic would not catch
"""

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema
from pydantic_core import PydanticCustomError

from uln.core.errors import ULNError
from uln.core.uln import ULN


ULN_JSON_SCHEMA: dict[str, Any] = {
    "type": "string",
    "pattern": "^[0-9]{10}$",
    "description": "10-digit Unique Learner Number",
    "examples": ["0000000042"],
}


def validate_uln(value: Any) -> ULN:
    """Coerce model input to a ULN. Raises PydanticCustomError on any ULN failure."""
    try:
        return ULN.from_string(value)
    except ULNError as exc:
        raise PydanticCustomError(exc.code.lower(), exc.message) from exc


def serialize_uln(uln: ULN) -> str:
    return uln.value


ULNField = Annotated[
    ULN,
    PlainValidator(validate_uln),
    PlainSerializer(serialize_uln, return_type=str),
    WithJsonSchema(ULN_JSON_SCHEMA),
]
