"""Requests — one immutable value type per API operation, routed by runtime type.

Invariants:
    - Every request type maps to exactly one Result type (Request[Result]); None is "no content"
    - Requests are frozen dataclasses: built once by the route, never mutated downstream
    - `payload` is the validation target; requests without a body expose themselves
    - ALL_REQUEST_TYPES is the explicit list the startup self-check verifies against

Design Decisions:
    - Explicit tuple over Request.__subclasses__(): adding an operation means editing
      this file AND the dispatch table (ADR: no auto-discovery)
    - Commands/queries split kept only in naming; the pipeline treats them alike
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from petstore.core.domain_types import OrderId, PetId, PetStatus, TestEnum, Username
from petstore.schemas.fake import TestNullableDto
from petstore.schemas.order import OrderDto
from petstore.schemas.pet import PetDto
from petstore.schemas.user import UserDto

ResultT = TypeVar("ResultT")


class Request(Generic[ResultT]):
    """Base for all operation inputs."""

    @property
    def payload(self) -> object:
        return self


# ─── Pet ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class AddPetCommand(Request[PetDto]):
    pet: PetDto

    @property
    def payload(self) -> object:
        return self.pet


@dataclass(frozen=True)
class UpdatePetCommand(Request[PetDto]):
    pet: PetDto

    @property
    def payload(self) -> object:
        return self.pet


@dataclass(frozen=True)
class DeletePetCommand(Request[None]):
    pet_id: PetId
    api_key: str | None = None


@dataclass(frozen=True)
class FindPetsByStatusQuery(Request[list[PetDto]]):
    statuses: tuple[PetStatus, ...]


@dataclass(frozen=True)
class FindPetsByTagsQuery(Request[list[PetDto]]):
    tags: tuple[str, ...]


@dataclass(frozen=True)
class GetPetByIdQuery(Request[PetDto]):
    pet_id: PetId


# ─── Store ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class GetInventoryQuery(Request[dict[str, int]]):
    pass


@dataclass(frozen=True)
class PlaceOrderCommand(Request[OrderDto]):
    order: OrderDto

    @property
    def payload(self) -> object:
        return self.order


@dataclass(frozen=True)
class GetOrderByIdQuery(Request[OrderDto]):
    order_id: OrderId


@dataclass(frozen=True)
class DeleteOrderCommand(Request[None]):
    order_id: OrderId


# ─── User ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CreateUserCommand(Request[None]):
    user: UserDto

    @property
    def payload(self) -> object:
        return self.user


@dataclass(frozen=True)
class CreateUsersWithArrayInputCommand(Request[None]):
    users: tuple[UserDto, ...]


@dataclass(frozen=True)
class CreateUsersWithListInputCommand(Request[None]):
    users: tuple[UserDto, ...]


@dataclass(frozen=True)
class LoginUserQuery(Request[str]):
    username: str
    password: str


@dataclass(frozen=True)
class LogoutUserQuery(Request[None]):
    pass


@dataclass(frozen=True)
class GetUserByNameQuery(Request[UserDto]):
    username: Username


@dataclass(frozen=True)
class UpdateUserCommand(Request[None]):
    username: Username
    user: UserDto

    @property
    def payload(self) -> object:
        return self.user


@dataclass(frozen=True)
class DeleteUserCommand(Request[None]):
    username: Username


# ─── Default ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class TestEnumQuery(Request[str]):
    __test__ = False  # not a pytest class
    test_query: TestEnum | None = None


# ─── Fake ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FakeNullableExampleTestQuery(Request[TestNullableDto]):
    pass


@dataclass(frozen=True)
class FakeParameterExampleTestQuery(Request[None]):
    data: PetDto


ALL_REQUEST_TYPES: tuple[type[Request], ...] = (
    AddPetCommand, UpdatePetCommand, DeletePetCommand,
    FindPetsByStatusQuery, FindPetsByTagsQuery, GetPetByIdQuery,
    GetInventoryQuery, PlaceOrderCommand, GetOrderByIdQuery, DeleteOrderCommand,
    CreateUserCommand, CreateUsersWithArrayInputCommand, CreateUsersWithListInputCommand,
    LoginUserQuery, LogoutUserQuery, GetUserByNameQuery, UpdateUserCommand,
    DeleteUserCommand,
    TestEnumQuery,
    FakeNullableExampleTestQuery, FakeParameterExampleTestQuery,
)
