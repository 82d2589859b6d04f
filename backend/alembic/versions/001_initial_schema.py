"""Initial schema — pets, orders, users.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_BIG_ID = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    op.create_table(
        "pets",
        sa.Column("id", _BIG_ID, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("category", sa.JSON, nullable=True),
        sa.Column("photo_urls", sa.JSON, nullable=False),
        sa.Column("tags", sa.JSON, nullable=False),
        sa.Column("status", sa.String(20), nullable=True),
    )
    op.create_index("ix_pets_status", "pets", ["status"])

    op.create_table(
        "orders",
        sa.Column("id", _BIG_ID, primary_key=True, autoincrement=True),
        sa.Column("pet_id", _BIG_ID, nullable=False),
        sa.Column("quantity", sa.Integer, nullable=True),
        sa.Column("ship_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("status", sa.String(20), nullable=True),
        sa.Column("complete", sa.Boolean, nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "users",
        sa.Column("id", _BIG_ID, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(100), nullable=False, unique=True),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        sa.Column("email", sa.String(200), nullable=True),
        sa.Column("password", sa.String(200), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("user_status", sa.Integer, nullable=True),
    )


def downgrade() -> None:
    op.drop_table("users")
    op.drop_table("orders")
    op.drop_index("ix_pets_status", table_name="pets")
    op.drop_table("pets")
