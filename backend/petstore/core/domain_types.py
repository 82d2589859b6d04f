"""Domain Types — enums, identity types, and the process-wide enum codec.

Invariants:
    - PetId, OrderId wrap int; Username wraps str — never bare primitives in handlers
    - Enum values are internal (auto ints); wire tokens live ONLY in the tables below
    - ENUM_CODEC is built and frozen at import: a bad table fails the process at boot

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Plain Enum (not str Enum): forces every wire crossing through ENUM_CODEC
      (ADR: wire tokens are public contract, variant spelling is not)
"""

from enum import Enum, auto
from typing import NewType

from petstore.core.enum_codec import EnumCodec


# ─── Identity Types ──────────────────────────────────────────────

PetId = NewType("PetId", int)
OrderId = NewType("OrderId", int)
Username = NewType("Username", str)


# ─── Enums ───────────────────────────────────────────────────────

class PetStatus(Enum):
    """Pet status in the store."""
    AVAILABLE = auto()
    PENDING = auto()
    SOLD = auto()


class OrderStatus(Enum):
    """Order lifecycle."""
    PLACED = auto()
    APPROVED = auto()
    DELIVERED = auto()


class TestEnum(Enum):
    """Query enum used by the /test operation."""
    __test__ = False  # not a pytest class
    A = auto()
    B = auto()


# ─── Wire Tables ─────────────────────────────────────────────────

PET_STATUS_WIRE = {
    PetStatus.AVAILABLE: "available",
    PetStatus.PENDING: "pending",
    PetStatus.SOLD: "sold",
}

ORDER_STATUS_WIRE = {
    OrderStatus.PLACED: "placed",
    OrderStatus.APPROVED: "approved",
    OrderStatus.DELIVERED: "delivered",
}

TEST_ENUM_WIRE = {
    TestEnum.A: "A",
    TestEnum.B: "B",
}


def build_enum_codec() -> EnumCodec:
    """Register every wire table. Raises EnumMappingError on a non-bijective table."""
    codec = EnumCodec()
    codec.register(PetStatus, PET_STATUS_WIRE)
    codec.register(OrderStatus, ORDER_STATUS_WIRE)
    codec.register(TestEnum, TEST_ENUM_WIRE)
    return codec.freeze()


ENUM_CODEC = build_enum_codec()
