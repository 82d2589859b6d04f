"""Store Routes — /v2/store inventory and orders."""

from fastapi import APIRouter, Depends, status

from petstore.api.dependencies import PathId, get_dispatcher
from petstore.api.responses import render
from petstore.core.domain_types import OrderId
from petstore.schemas.order import OrderDto
from petstore.schemas.requests import (
    DeleteOrderCommand, GetInventoryQuery, GetOrderByIdQuery, PlaceOrderCommand,
)
from petstore.services.request_dispatch import Dispatcher

router = APIRouter(prefix="/v2/store", tags=["store"])


@router.get(
    "/inventory", response_model=dict[str, int],
    summary="Returns pet inventories by status",
)
async def get_inventory(dispatcher: Dispatcher = Depends(get_dispatcher)):
    return render(await dispatcher.dispatch(GetInventoryQuery()))


@router.post(
    "/order", response_model=OrderDto, status_code=status.HTTP_201_CREATED,
    summary="Place an order for a pet",
)
async def place_order(body: OrderDto, dispatcher: Dispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.dispatch(PlaceOrderCommand(order=body))
    return render(outcome, status.HTTP_201_CREATED)


@router.get(
    "/order/{order_id}", response_model=OrderDto,
    summary="Find purchase order by ID",
)
async def get_order_by_id(
    order_id: PathId, dispatcher: Dispatcher = Depends(get_dispatcher),
):
    outcome = await dispatcher.dispatch(GetOrderByIdQuery(order_id=OrderId(order_id)))
    return render(outcome)


@router.delete(
    "/order/{order_id}", status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete purchase order by ID",
)
async def delete_order(
    order_id: PathId, dispatcher: Dispatcher = Depends(get_dispatcher),
):
    outcome = await dispatcher.dispatch(DeleteOrderCommand(order_id=OrderId(order_id)))
    return render(outcome, status.HTTP_204_NO_CONTENT)
