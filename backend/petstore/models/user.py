"""User ORM — store account.

Invariants:
    - username is unique; it is the external identifier for every user route
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petstore.db.base import Base, BigId


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(BigId, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str | None] = mapped_column(String(200), nullable=True)
    password: Mapped[str | None] = mapped_column(String(200), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    user_status: Mapped[int | None] = mapped_column(Integer, nullable=True)
