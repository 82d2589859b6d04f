"""Order Schemas — purchase orders as exchanged on the wire."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from petstore.schemas.wire import Int32, Int64, OrderStatusWire


class OrderDto(BaseModel):
    """An order for a pet from the pet store."""
    model_config = ConfigDict(populate_by_name=True)

    id: Int64 | None = None
    pet_id: Int64 | None = Field(None, alias="petId")
    quantity: Int32 | None = None
    ship_date: datetime | None = Field(None, alias="shipDate")
    status: OrderStatusWire | None = None
    complete: bool = False
