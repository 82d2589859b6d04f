"""Domain Types — verifies enum definitions and identity wrappers.

Tests:
    - NewType wrappers exist and are callable
    - Enum variants are internal values, not wire tokens
    - Every domain enum is registered with ENUM_CODEC
"""

from petstore.core.domain_types import (
    ENUM_CODEC, OrderId, OrderStatus, PetId, PetStatus, TestEnum, Username,
)


def test_identity_types_wrap_primitives():
    assert PetId(7) == 7
    assert OrderId(3) == 3
    assert Username("alice") == "alice"


def test_pet_status_has_three_states():
    assert [s.name for s in PetStatus] == ["AVAILABLE", "PENDING", "SOLD"]


def test_order_status_has_three_states():
    assert [s.name for s in OrderStatus] == ["PLACED", "APPROVED", "DELIVERED"]


def test_enum_values_are_not_wire_tokens():
    assert PetStatus.AVAILABLE.value != "available"
    assert OrderStatus.PLACED.value != "placed"


def test_all_domain_enums_registered():
    assert set(ENUM_CODEC.enum_types) == {PetStatus, OrderStatus, TestEnum}
