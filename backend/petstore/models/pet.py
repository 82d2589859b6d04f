"""Pet ORM — a pet for sale.

Design Decisions:
    - JSON columns for category, photo_urls, tags: nested value objects, never queried
      relationally except tags (filtered in Python)
"""

from sqlalchemy import String, JSON
from sqlalchemy.orm import Mapped, mapped_column

from petstore.db.base import Base, BigId


class Pet(Base):
    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(BigId, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    photo_urls: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    status: Mapped[str | None] = mapped_column(String(20), nullable=True, index=True)
