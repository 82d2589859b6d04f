"""User Routes — /v2/user account operations.

Invariants:
    - /login and /logout are declared before /{username} so they are not captured by it
"""

from fastapi import APIRouter, Depends, Query, status

from petstore.api.dependencies import get_dispatcher
from petstore.api.responses import render
from petstore.core.domain_types import Username
from petstore.schemas.requests import (
    CreateUserCommand, CreateUsersWithArrayInputCommand, CreateUsersWithListInputCommand,
    DeleteUserCommand, GetUserByNameQuery, LoginUserQuery, LogoutUserQuery,
    UpdateUserCommand,
)
from petstore.schemas.user import UserDto
from petstore.services.request_dispatch import Dispatcher

router = APIRouter(prefix="/v2/user", tags=["user"])


@router.post("", status_code=status.HTTP_204_NO_CONTENT, summary="Create user")
async def create_user(body: UserDto, dispatcher: Dispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.dispatch(CreateUserCommand(user=body))
    return render(outcome, status.HTTP_204_NO_CONTENT)


@router.post(
    "/createWithArray", status_code=status.HTTP_204_NO_CONTENT,
    summary="Creates list of users with given input array",
)
async def create_users_with_array(
    body: list[UserDto], dispatcher: Dispatcher = Depends(get_dispatcher),
):
    outcome = await dispatcher.dispatch(
        CreateUsersWithArrayInputCommand(users=tuple(body)),
    )
    return render(outcome, status.HTTP_204_NO_CONTENT)


@router.post(
    "/createWithList", status_code=status.HTTP_204_NO_CONTENT,
    summary="Creates list of users with given input array",
)
async def create_users_with_list(
    body: list[UserDto], dispatcher: Dispatcher = Depends(get_dispatcher),
):
    outcome = await dispatcher.dispatch(
        CreateUsersWithListInputCommand(users=tuple(body)),
    )
    return render(outcome, status.HTTP_204_NO_CONTENT)


@router.get("/login", response_model=str, summary="Logs user into the system")
async def login_user(
    username: str = Query(...),
    password: str = Query(...),
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    outcome = await dispatcher.dispatch(
        LoginUserQuery(username=username, password=password),
    )
    return render(outcome)


@router.get("/logout", summary="Logs out current logged in user session")
async def logout_user(dispatcher: Dispatcher = Depends(get_dispatcher)):
    return render(await dispatcher.dispatch(LogoutUserQuery()))


@router.get("/{username}", response_model=UserDto, summary="Get user by user name")
async def get_user_by_name(
    username: str, dispatcher: Dispatcher = Depends(get_dispatcher),
):
    outcome = await dispatcher.dispatch(GetUserByNameQuery(username=Username(username)))
    return render(outcome)


@router.put(
    "/{username}", status_code=status.HTTP_204_NO_CONTENT, summary="Updated user",
)
async def update_user(
    username: str, body: UserDto, dispatcher: Dispatcher = Depends(get_dispatcher),
):
    outcome = await dispatcher.dispatch(
        UpdateUserCommand(username=Username(username), user=body),
    )
    return render(outcome, status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{username}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete user",
)
async def delete_user(
    username: str, dispatcher: Dispatcher = Depends(get_dispatcher),
):
    outcome = await dispatcher.dispatch(DeleteUserCommand(username=Username(username)))
    return render(outcome, status.HTTP_204_NO_CONTENT)
