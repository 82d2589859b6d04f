"""Dispatch Table — the single place where request types meet their handlers.

Invariants:
    - Every mapping explicit: adding an operation requires editing this dict
    - build_dispatcher() runs the startup self-check against ALL_REQUEST_TYPES
    - Behavior order is fixed here: logging wraps validation wraps the handler

Design Decisions:
    - Handlers instantiated once per process with their repositories
      (ADR: handlers hold no per-request state; repositories open a DB session per call)
"""

from petstore.core.repository_protocols import OrderRepository, PetRepository, UserRepository
from petstore.core.validation import ValidatorRegistry
from petstore.schemas import requests as rq
from petstore.schemas.fake import TestNullableDto
from petstore.services.behaviors import LoggingBehavior, ValidationBehavior
from petstore.services.handle_default import echo_test_enum
from petstore.services.handle_fake import FakeHandlers
from petstore.services.handle_pet import PetHandlers
from petstore.services.handle_store import StoreHandlers
from petstore.services.handle_user import UserHandlers
from petstore.services.request_dispatch import Dispatcher, HandlerRegistry


def build_dispatcher(
    pets: PetRepository,
    orders: OrderRepository,
    users: UserRepository,
    validators: ValidatorRegistry,
    nullable_example: TestNullableDto | None = None,
) -> Dispatcher:
    """Wire handlers + behaviors. Raises ConfigurationError on a wiring defect."""
    pet = PetHandlers(pets)
    store = StoreHandlers(pets, orders)
    user = UserHandlers(users)
    fake = FakeHandlers(nullable_example)

    registry = HandlerRegistry()
    registry.register_all({
        # Pet (6)
        rq.AddPetCommand: pet.add_pet,
        rq.UpdatePetCommand: pet.update_pet,
        rq.DeletePetCommand: pet.delete_pet,
        rq.FindPetsByStatusQuery: pet.find_pets_by_status,
        rq.FindPetsByTagsQuery: pet.find_pets_by_tags,
        rq.GetPetByIdQuery: pet.get_pet_by_id,

        # Store (4)
        rq.GetInventoryQuery: store.get_inventory,
        rq.PlaceOrderCommand: store.place_order,
        rq.GetOrderByIdQuery: store.get_order_by_id,
        rq.DeleteOrderCommand: store.delete_order,

        # User (8)
        rq.CreateUserCommand: user.create_user,
        rq.CreateUsersWithArrayInputCommand: user.create_users_with_array,
        rq.CreateUsersWithListInputCommand: user.create_users_with_list,
        rq.LoginUserQuery: user.login_user,
        rq.LogoutUserQuery: user.logout_user,
        rq.GetUserByNameQuery: user.get_user_by_name,
        rq.UpdateUserCommand: user.update_user,
        rq.DeleteUserCommand: user.delete_user,

        # Default (1)
        rq.TestEnumQuery: echo_test_enum,

        # Fake (2)
        rq.FakeNullableExampleTestQuery: fake.nullable_example_test,
        rq.FakeParameterExampleTestQuery: fake.parameter_example_test,
    })
    registry.verify(rq.ALL_REQUEST_TYPES)

    return Dispatcher(
        registry.freeze(),
        behaviors=(LoggingBehavior(), ValidationBehavior(validators)),
    )
