"""ORM Models — SQLAlchemy declarative models for pets, orders and users.

Invariants:
    - All models inherit from Base (db/base.py)
    - Enum columns store the variant NAME (internal spelling), never the wire token

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete for create_all/alembic
"""

from petstore.models.pet import Pet  # noqa: F401
from petstore.models.order import Order  # noqa: F401
from petstore.models.user import User  # noqa: F401
