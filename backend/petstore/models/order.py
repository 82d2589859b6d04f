"""Order ORM — a purchase order for a pet."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petstore.db.base import Base, BigId


class Order(Base):
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(BigId, primary_key=True, autoincrement=True)
    pet_id: Mapped[int] = mapped_column(BigId, nullable=False)
    quantity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    ship_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    status: Mapped[str | None] = mapped_column(String(20), nullable=True)
    complete: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
