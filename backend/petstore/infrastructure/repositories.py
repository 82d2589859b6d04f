"""SQL Repositories — SQLAlchemy implementations of the core storage Protocols.

Invariants:
    - Each call opens its own session via the injected provider and commits before returning
    - Enum columns hold the variant name; conversion to/from domain variants happens here
    - Rows leave as plain dicts keyed like the DTO attributes (repository_protocols.py)

Design Decisions:
    - Session provider injected (db_manager.session in production, a test factory in tests)
      instead of a request-scoped session: handlers are process-wide singletons
    - add() on pets merges by id: clients may send their own id (Petstore convention)
"""

from contextlib import AbstractAsyncContextManager
from typing import Callable

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from petstore.core.domain_types import OrderId, OrderStatus, PetId, PetStatus, Username
from petstore.models.order import Order
from petstore.models.pet import Pet
from petstore.models.user import User

SessionProvider = Callable[[], AbstractAsyncContextManager[AsyncSession]]


def _name(variant) -> str | None:
    return variant.name if variant is not None else None


# ─── Pets ────────────────────────────────────────────────────────

def _pet_to_dict(row: Pet) -> dict:
    return {
        "id": row.id,
        "name": row.name,
        "category": row.category,
        "photo_urls": list(row.photo_urls or []),
        "tags": list(row.tags or []),
        "status": PetStatus[row.status] if row.status else None,
    }


def _apply_pet(row: Pet, pet: dict) -> None:
    row.name = pet.get("name") or ""
    row.category = pet.get("category")
    row.photo_urls = pet.get("photo_urls") or []
    row.tags = pet.get("tags") or []
    row.status = _name(pet.get("status"))


class SqlPetRepository:
    """PetRepository over SQLAlchemy."""

    def __init__(self, session_provider: SessionProvider):
        self._session = session_provider

    async def add(self, pet: dict) -> dict:
        async with self._session() as db:
            row = Pet(id=pet.get("id"))
            _apply_pet(row, pet)
            row = await db.merge(row)
            await db.commit()
            return _pet_to_dict(row)

    async def update(self, pet: dict) -> dict | None:
        async with self._session() as db:
            row = await db.get(Pet, pet["id"])
            if row is None:
                return None
            _apply_pet(row, pet)
            await db.commit()
            return _pet_to_dict(row)

    async def get(self, pet_id: PetId) -> dict | None:
        async with self._session() as db:
            row = await db.get(Pet, pet_id)
            return _pet_to_dict(row) if row else None

    async def delete(self, pet_id: PetId) -> bool:
        async with self._session() as db:
            result = await db.execute(delete(Pet).where(Pet.id == pet_id))
            await db.commit()
            return result.rowcount > 0

    async def find_by_status(self, statuses: tuple[PetStatus, ...]) -> list[dict]:
        async with self._session() as db:
            result = await db.execute(
                select(Pet)
                .where(Pet.status.in_([s.name for s in statuses]))
                .order_by(Pet.id),
            )
            return [_pet_to_dict(r) for r in result.scalars().all()]

    async def find_by_tags(self, tags: tuple[str, ...]) -> list[dict]:
        wanted = set(tags)
        async with self._session() as db:
            result = await db.execute(select(Pet).order_by(Pet.id))
            return [
                _pet_to_dict(r) for r in result.scalars().all()
                if wanted & {t.get("name") for t in (r.tags or [])}
            ]

    async def count_by_status(self) -> dict[PetStatus, int]:
        async with self._session() as db:
            result = await db.execute(
                select(Pet.status, func.count(Pet.id))
                .where(Pet.status.is_not(None))
                .group_by(Pet.status),
            )
            return {PetStatus[status]: count for status, count in result.all()}


# ─── Orders ──────────────────────────────────────────────────────

def _order_to_dict(row: Order) -> dict:
    return {
        "id": row.id,
        "pet_id": row.pet_id,
        "quantity": row.quantity,
        "ship_date": row.ship_date,
        "status": OrderStatus[row.status] if row.status else None,
        "complete": row.complete,
    }


class SqlOrderRepository:
    """OrderRepository over SQLAlchemy."""

    def __init__(self, session_provider: SessionProvider):
        self._session = session_provider

    async def add(self, order: dict) -> dict:
        async with self._session() as db:
            row = Order(
                id=order.get("id"),
                pet_id=order["pet_id"],
                quantity=order.get("quantity"),
                ship_date=order.get("ship_date"),
                status=_name(order.get("status")),
                complete=bool(order.get("complete")),
            )
            row = await db.merge(row)
            await db.commit()
            return _order_to_dict(row)

    async def get(self, order_id: OrderId) -> dict | None:
        async with self._session() as db:
            row = await db.get(Order, order_id)
            return _order_to_dict(row) if row else None

    async def delete(self, order_id: OrderId) -> bool:
        async with self._session() as db:
            result = await db.execute(delete(Order).where(Order.id == order_id))
            await db.commit()
            return result.rowcount > 0


# ─── Users ───────────────────────────────────────────────────────

_USER_FIELDS = (
    "username", "first_name", "last_name", "email", "password", "phone", "user_status",
)


def _user_to_dict(row: User) -> dict:
    return {"id": row.id, **{f: getattr(row, f) for f in _USER_FIELDS}}


class SqlUserRepository:
    """UserRepository over SQLAlchemy."""

    def __init__(self, session_provider: SessionProvider):
        self._session = session_provider

    async def add_many(self, users: list[dict]) -> None:
        async with self._session() as db:
            db.add_all([
                User(id=u.get("id"), **{f: u.get(f) for f in _USER_FIELDS})
                for u in users
            ])
            await db.commit()

    async def get(self, username: Username) -> dict | None:
        async with self._session() as db:
            result = await db.execute(select(User).where(User.username == username))
            row = result.scalar_one_or_none()
            return _user_to_dict(row) if row else None

    async def update(self, username: Username, user: dict) -> bool:
        async with self._session() as db:
            result = await db.execute(select(User).where(User.username == username))
            row = result.scalar_one_or_none()
            if row is None:
                return False
            for f in _USER_FIELDS:
                value = user.get(f)
                if value is not None:
                    setattr(row, f, value)
            await db.commit()
            return True

    async def delete(self, username: Username) -> bool:
        async with self._session() as db:
            result = await db.execute(delete(User).where(User.username == username))
            await db.commit()
            return result.rowcount > 0
