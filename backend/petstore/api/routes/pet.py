"""Pet Routes — /v2/pet operations.

Invariants:
    - Routes only decode input into a request value, dispatch, and render
    - Enum query tokens decode through ENUM_CODEC before a request exists
"""

from fastapi import APIRouter, Depends, Header, Query, status

from petstore.api.dependencies import PathId, get_dispatcher
from petstore.api.responses import decode_tokens, render
from petstore.core.domain_types import PetId, PetStatus
from petstore.core.faults import is_fault
from petstore.schemas.pet import PetDto
from petstore.schemas.requests import (
    AddPetCommand, DeletePetCommand, FindPetsByStatusQuery,
    FindPetsByTagsQuery, GetPetByIdQuery, UpdatePetCommand,
)
from petstore.services.request_dispatch import Dispatcher

router = APIRouter(prefix="/v2", tags=["pet"])


@router.post(
    "/pet", response_model=PetDto, status_code=status.HTTP_201_CREATED,
    summary="Add a new pet to the store",
)
async def add_pet(body: PetDto, dispatcher: Dispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.dispatch(AddPetCommand(pet=body))
    return render(outcome, status.HTTP_201_CREATED)


@router.put("/pet", response_model=PetDto, summary="Update an existing pet")
async def update_pet(body: PetDto, dispatcher: Dispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.dispatch(UpdatePetCommand(pet=body))
    return render(outcome)


@router.get(
    "/pet/findByStatus", response_model=list[PetDto],
    summary="Finds Pets by status",
)
async def find_pets_by_status(
    status_tokens: list[str] = Query(..., alias="status"),
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    statuses = decode_tokens(PetStatus, status_tokens, "status")
    if is_fault(statuses):
        return render(statuses)
    outcome = await dispatcher.dispatch(FindPetsByStatusQuery(statuses=statuses))
    return render(outcome)


@router.get(
    "/pet/findByTags", response_model=list[PetDto], summary="Finds Pets by tags",
)
async def find_pets_by_tags(
    tags: list[str] = Query(...),
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    outcome = await dispatcher.dispatch(FindPetsByTagsQuery(tags=tuple(tags)))
    return render(outcome)


@router.get("/pet/{pet_id}", response_model=PetDto, summary="Find pet by ID")
async def get_pet_by_id(
    pet_id: PathId, dispatcher: Dispatcher = Depends(get_dispatcher),
):
    outcome = await dispatcher.dispatch(GetPetByIdQuery(pet_id=PetId(pet_id)))
    return render(outcome)


@router.delete(
    "/pet/{pet_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Deletes a pet",
)
async def delete_pet(
    pet_id: PathId,
    api_key: str | None = Header(None),
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    outcome = await dispatcher.dispatch(
        DeletePetCommand(pet_id=PetId(pet_id), api_key=api_key),
    )
    return render(outcome, status.HTTP_204_NO_CONTENT)
