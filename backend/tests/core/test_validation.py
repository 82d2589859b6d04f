"""Validator Registry — tests for rule evaluation without fail-fast.

Tests cover:
    - Every failing field is reported (no first-error truncation)
    - Messages for one field keep registration order
    - Outcome keys use the pydantic alias (wire name)
    - each() validates every element with indexed keys
    - Unregistered payload types are valid
    - Duplicate / late registration rejected
"""

from dataclasses import dataclass

import pytest

from petstore.core.errors import ConfigurationError, RegistryFrozenError
from petstore.core.validation import (
    ValidatorRegistry, each, email_address, greater_than, max_length,
    min_length, not_empty, not_null, wire_name,
)
from petstore.schemas.pet import PetDto
from petstore.schemas.requests import CreateUsersWithArrayInputCommand
from petstore.schemas.user import UserDto
from petstore.schemas.validators import build_validator_registry


@dataclass
class Payload:
    name: str | None = None
    count: int | None = None
    email: str | None = None


def _registry(*rules) -> ValidatorRegistry:
    registry = ValidatorRegistry()
    registry.register(Payload, list(rules))
    return registry.freeze()


# ─── rule factories ──────────────────────────────────────────────

def test_not_empty_rejects_none_blank_and_empty_collections():
    rule = not_empty("name")
    assert rule.evaluate(Payload(name=None)) is not None
    assert rule.evaluate(Payload(name="   ")) is not None
    assert rule.evaluate(Payload(name="rex")) is None


def test_not_null_accepts_empty_values():
    rule = not_null("name")
    assert rule.evaluate(Payload(name="")) is None
    assert rule.evaluate(Payload()) == "'Name' must not be empty."


def test_optional_rules_skip_absent_values():
    for rule in (greater_than("count", 0), min_length("name", 3),
                 max_length("name", 3), email_address("email")):
        assert rule.evaluate(Payload()) is None


def test_greater_than_and_lengths():
    assert greater_than("count", 0).evaluate(Payload(count=0)) is not None
    assert greater_than("count", 0).evaluate(Payload(count=1)) is None
    assert min_length("name", 3).evaluate(Payload(name="ab")) is not None
    assert max_length("name", 3).evaluate(Payload(name="abcd")) is not None


def test_email_address():
    rule = email_address("email")
    assert rule.evaluate(Payload(email="a@b.io")) is None
    assert rule.evaluate(Payload(email="not-an-email")) is not None


# ─── registry ────────────────────────────────────────────────────

def test_all_failing_fields_reported():
    registry = _registry(not_empty("name"), greater_than("count", 0), email_address("email"))
    outcome = registry.validate(Payload(name="", count=-1, email="bad"))
    assert set(outcome) == {"name", "count", "email"}


def test_messages_grouped_per_field_in_order():
    registry = _registry(not_null("name"), min_length("name", 3), max_length("name", 1))
    outcome = registry.validate(Payload(name="ab"))
    assert outcome["name"] == (
        "The length of 'Name' must be at least 3 characters.",
        "The length of 'Name' must be 1 characters or fewer.",
    )


def test_valid_payload_gives_empty_outcome():
    registry = _registry(not_empty("name"))
    assert registry.validate(Payload(name="rex")) == {}


def test_unregistered_type_is_valid():
    assert _registry(not_empty("name")).validate(object()) == {}


def test_outcome_keys_use_wire_alias():
    outcome = build_validator_registry().validate(PetDto())
    assert set(outcome) == {"name", "photoUrls"}
    assert wire_name(PetDto, "photo_urls") == "photoUrls"


def test_each_validates_every_element():
    registry = build_validator_registry()
    command = CreateUsersWithArrayInputCommand(users=(
        UserDto(username="ok"),
        UserDto(username="", email="nope"),
        UserDto(),
    ))
    outcome = registry.validate(command)
    assert set(outcome) == {"users[1].username", "users[1].email", "users[2].username"}


def test_duplicate_registration_rejected():
    registry = ValidatorRegistry()
    registry.register(Payload, [not_empty("name")])
    with pytest.raises(ConfigurationError):
        registry.register(Payload, [])


def test_frozen_registry_rejects_registration():
    registry = _registry()
    with pytest.raises(RegistryFrozenError):
        registry.register(UserDto, [])


def test_registry_exposes_rules():
    registry = _registry(not_empty("name"), each("name", str))
    assert registry.has_rules(Payload)
    assert len(registry.rules_for(Payload)) == 2
    assert not registry.has_rules(UserDto)
