"""Fake Routes — /v2/fake example endpoints.

Invariants:
    - parameter_example_test decodes the `data` query string as a JSON PetDto before
      dispatch; decode failures never reach the handler
"""

from fastapi import APIRouter, Depends, Query

from petstore.api.dependencies import get_dispatcher
from petstore.api.responses import decode_json_param, render
from petstore.core.faults import is_fault
from petstore.schemas.fake import TestNullableDto
from petstore.schemas.pet import PetDto
from petstore.schemas.requests import (
    FakeNullableExampleTestQuery, FakeParameterExampleTestQuery,
)
from petstore.services.request_dispatch import Dispatcher

router = APIRouter(prefix="/v2/fake", tags=["fake"])


@router.get(
    "/nullable_example_test", response_model=TestNullableDto,
    summary="Fake endpoint to test nullable example (object)",
)
async def fake_nullable_example_test(dispatcher: Dispatcher = Depends(get_dispatcher)):
    return render(await dispatcher.dispatch(FakeNullableExampleTestQuery()))


@router.get(
    "/parameter_example_test",
    summary="fake endpoint to test parameter example (object)",
)
async def fake_parameter_example_test(
    data: str | None = Query(None, description="JSON-encoded Pet"),
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    pet = decode_json_param(PetDto, data, "data")
    if is_fault(pet):
        return render(pet)
    return render(await dispatcher.dispatch(FakeParameterExampleTestQuery(data=pet)))
