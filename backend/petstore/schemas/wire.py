"""Wire Enum Adapter — plugs ENUM_CODEC into pydantic decoding and JSON serialization.

Invariants:
    - Decoding a str goes through ENUM_CODEC.decode; DecodeFault becomes a pydantic error
      (surfaced to clients as MalformedInput / 400 Bad Request)
    - Already-decoded variants pass through unchanged (handlers build DTOs from domain values)
    - JSON-mode serialization emits the wire token via ENUM_CODEC.encode
    - OpenAPI schema advertises the wire tokens, not the internal values
    - Integers are bounded to their OpenAPI format (int32/int64): an out-of-range value is a
      decode failure (400), never a storage overflow (500)

Design Decisions:
    - Annotated + BeforeValidator/PlainSerializer over custom pydantic types: the DTOs
      keep plain Enum annotations readable (ADR: pydantic handles the plumbing natively)
"""

from enum import Enum
from functools import partial
from typing import Annotated, Any

from pydantic import BeforeValidator, Field, PlainSerializer, WithJsonSchema

from petstore.core.domain_types import ENUM_CODEC, OrderStatus, PetStatus, TestEnum
from petstore.core.enum_codec import DecodeFault


def _decode(enum_type: type[Enum], value: Any) -> Enum:
    if isinstance(value, enum_type):
        return value
    if not isinstance(value, str):
        raise ValueError(f"{enum_type.__name__} must be a string token")
    result = ENUM_CODEC.decode(enum_type, value)
    if isinstance(result, DecodeFault):
        raise ValueError(result.message)
    return result


def wire_enum(enum_type: type[Enum]) -> Any:
    """Annotated alias that decodes/encodes `enum_type` through the codec."""
    return Annotated[
        enum_type,
        BeforeValidator(partial(_decode, enum_type)),
        PlainSerializer(ENUM_CODEC.encode, return_type=str, when_used="json"),
        WithJsonSchema({"type": "string", "enum": ENUM_CODEC.tokens(enum_type)}),
    ]


PetStatusWire = wire_enum(PetStatus)
OrderStatusWire = wire_enum(OrderStatus)
TestEnumWire = wire_enum(TestEnum)


# ─── Integer formats ─────────────────────────────────────────────

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]
