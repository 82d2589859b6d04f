"""Boundary Protocols — storage contracts between handlers and the persistence shell.

Invariants:
    - Handlers NEVER import SQLAlchemy — they see only these Protocols
    - Records cross the boundary as plain dicts keyed by snake_case DTO attribute names
    - Enum fields cross as domain variants (PetStatus, OrderStatus), never wire tokens
    - Absence is reported as None / False; handlers turn it into the NotFound fault

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the dispatch core only passes the
      suspension through
"""

from typing import Protocol

from petstore.core.domain_types import OrderId, PetId, PetStatus, Username


class PetRepository(Protocol):
    """Contract for pet persistence — implemented by shell."""
    async def add(self, pet: dict) -> dict: ...
    async def update(self, pet: dict) -> dict | None: ...
    async def get(self, pet_id: PetId) -> dict | None: ...
    async def delete(self, pet_id: PetId) -> bool: ...
    async def find_by_status(self, statuses: tuple[PetStatus, ...]) -> list[dict]: ...
    async def find_by_tags(self, tags: tuple[str, ...]) -> list[dict]: ...
    async def count_by_status(self) -> dict[PetStatus, int]: ...


class OrderRepository(Protocol):
    """Contract for order persistence — implemented by shell."""
    async def add(self, order: dict) -> dict: ...
    async def get(self, order_id: OrderId) -> dict | None: ...
    async def delete(self, order_id: OrderId) -> bool: ...


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def add_many(self, users: list[dict]) -> None: ...
    async def get(self, username: Username) -> dict | None: ...
    async def update(self, username: Username, user: dict) -> bool: ...
    async def delete(self, username: Username) -> bool: ...
