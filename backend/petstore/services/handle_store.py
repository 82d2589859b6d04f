"""Store Handlers — inventory and purchase orders (4 methods).

Invariants:
    - Inventory keys are wire tokens (ENUM_CODEC.encode); every status appears, even at 0
    - Absence is always returned as NotFound
"""

from petstore.core.domain_types import ENUM_CODEC, PetStatus
from petstore.core.faults import NotFound
from petstore.core.repository_protocols import OrderRepository, PetRepository
from petstore.schemas.order import OrderDto
from petstore.schemas.requests import (
    DeleteOrderCommand, GetInventoryQuery, GetOrderByIdQuery, PlaceOrderCommand,
)


class StoreHandlers:
    """Store operations over pet and order repositories."""

    def __init__(self, pets: PetRepository, orders: OrderRepository):
        self.pets = pets
        self.orders = orders

    async def get_inventory(self, request: GetInventoryQuery) -> dict[str, int]:
        counts = await self.pets.count_by_status()
        return {ENUM_CODEC.encode(s): counts.get(s, 0) for s in PetStatus}

    async def place_order(self, request: PlaceOrderCommand) -> OrderDto:
        record = await self.orders.add(request.order.model_dump())
        return OrderDto.model_validate(record)

    async def get_order_by_id(self, request: GetOrderByIdQuery) -> OrderDto | NotFound:
        record = await self.orders.get(request.order_id)
        if record is None:
            return NotFound("Order", str(request.order_id))
        return OrderDto.model_validate(record)

    async def delete_order(self, request: DeleteOrderCommand) -> None | NotFound:
        if not await self.orders.delete(request.order_id):
            return NotFound("Order", str(request.order_id))
        return None
