"""User Handlers — account CRUD plus login/logout (8 methods).

Invariants:
    - Passwords are stored as given and never returned (GetUserByName strips them)
    - Unknown username or wrong password on login -> NotFound (uniform absence signal)
    - Batch creation is all-or-nothing: validation covers every element first
    - A username taken by another account -> ValidationFailed on "username" (400), checked
      before any write; batches also reject duplicates among their own elements

Design Decisions:
    - Session token is an opaque random string; no server-side session store
      (ADR: authentication is out of scope, login only proves the credentials match)
"""

import secrets

from petstore.core.domain_types import Username
from petstore.core.faults import NotFound, ValidationFailed
from petstore.core.repository_protocols import UserRepository
from petstore.schemas.requests import (
    CreateUserCommand, CreateUsersWithArrayInputCommand, CreateUsersWithListInputCommand,
    DeleteUserCommand, GetUserByNameQuery, LoginUserQuery, LogoutUserQuery,
    UpdateUserCommand,
)
from petstore.schemas.user import UserDto

USERNAME_TAKEN = "'Username' already exists."


class UserHandlers:
    """User operations over a UserRepository."""

    def __init__(self, users: UserRepository):
        self.users = users

    async def create_user(self, request: CreateUserCommand) -> None | ValidationFailed:
        if await self.users.get(Username(request.user.username)) is not None:
            return ValidationFailed({"username": (USERNAME_TAKEN,)})
        await self.users.add_many([request.user.model_dump()])
        return None

    async def create_users_with_array(
        self, request: CreateUsersWithArrayInputCommand,
    ) -> None | ValidationFailed:
        return await self._create_batch(request.users)

    async def create_users_with_list(
        self, request: CreateUsersWithListInputCommand,
    ) -> None | ValidationFailed:
        return await self._create_batch(request.users)

    async def _create_batch(self, users: tuple[UserDto, ...]) -> None | ValidationFailed:
        taken: dict[str, tuple[str, ...]] = {}
        seen: set[str] = set()
        for i, user in enumerate(users):
            if user.username in seen or await self.users.get(Username(user.username)):
                taken[f"users[{i}].username"] = (USERNAME_TAKEN,)
            seen.add(user.username)
        if taken:
            return ValidationFailed(taken)
        await self.users.add_many([u.model_dump() for u in users])
        return None

    async def login_user(self, request: LoginUserQuery) -> str | NotFound:
        record = await self.users.get(Username(request.username))
        if record is None or not secrets.compare_digest(
            (record.get("password") or "").encode(), request.password.encode(),
        ):
            return NotFound("User", request.username)
        return f"logged in user session:{secrets.token_hex(16)}"

    def logout_user(self, request: LogoutUserQuery) -> None:
        return None

    async def get_user_by_name(self, request: GetUserByNameQuery) -> UserDto | NotFound:
        record = await self.users.get(request.username)
        if record is None:
            return NotFound("User", request.username)
        return UserDto.model_validate({**record, "password": None})

    async def update_user(
        self, request: UpdateUserCommand,
    ) -> None | NotFound | ValidationFailed:
        if await self.users.get(request.username) is None:
            return NotFound("User", request.username)
        new_name = request.user.username
        if new_name != request.username and await self.users.get(Username(new_name)):
            return ValidationFailed({"username": (USERNAME_TAKEN,)})
        if not await self.users.update(request.username, request.user.model_dump()):
            return NotFound("User", request.username)
        return None

    async def delete_user(self, request: DeleteUserCommand) -> None | NotFound:
        if not await self.users.delete(request.username):
            return NotFound("User", request.username)
        return None
