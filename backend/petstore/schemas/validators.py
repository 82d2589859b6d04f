"""Validator Table — every payload type's rules, registered explicitly in one place.

Invariants:
    - Rules for a type run in the order listed here
    - Payloads with no entry are valid by definition (queries without inputs)
    - build_validator_registry() returns a frozen registry; called once at startup
"""

from petstore.core.validation import (
    ValidatorRegistry, each, email_address, greater_than, min_length, not_empty, not_null,
)
from petstore.schemas.order import OrderDto
from petstore.schemas.pet import PetDto
from petstore.schemas.requests import (
    CreateUsersWithArrayInputCommand, CreateUsersWithListInputCommand, LoginUserQuery,
)
from petstore.schemas.user import UserDto


def build_validator_registry() -> ValidatorRegistry:
    registry = ValidatorRegistry()
    registry.register(PetDto, [
        not_empty("name"),
        not_null("photo_urls"),
    ])
    registry.register(OrderDto, [
        not_null("pet_id"),
        greater_than("quantity", 0),
    ])
    registry.register(UserDto, [
        not_empty("username"),
        email_address("email"),
        min_length("password", 8),
    ])
    registry.register(CreateUsersWithArrayInputCommand, [each("users", UserDto)])
    registry.register(CreateUsersWithListInputCommand, [each("users", UserDto)])
    registry.register(LoginUserQuery, [
        not_empty("username"),
        not_empty("password"),
    ])
    return registry.freeze()
