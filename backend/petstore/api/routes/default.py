"""Default Routes — /v2/test enum query echo.

Invariants:
    - testQuery is ONE token: the whole string is decoded ("A,B" is not a token)
    - Absent or empty testQuery means no value, not a decode failure
"""

from fastapi import APIRouter, Depends, Query

from petstore.api.dependencies import get_dispatcher
from petstore.api.responses import render
from petstore.core.domain_types import ENUM_CODEC, TestEnum
from petstore.core.enum_codec import DecodeFault
from petstore.core.faults import MalformedInput
from petstore.schemas.requests import TestEnumQuery
from petstore.services.request_dispatch import Dispatcher

router = APIRouter(prefix="/v2", tags=["default"])


@router.get("/test", response_model=str)
async def test_enum_query(
    test_query: str | None = Query(None, alias="testQuery"),
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    variant = None
    if test_query:
        variant = ENUM_CODEC.decode(TestEnum, test_query)
        if isinstance(variant, DecodeFault):
            return render(MalformedInput(f"testQuery: {variant.message}"))
    return render(await dispatcher.dispatch(TestEnumQuery(test_query=variant)))
