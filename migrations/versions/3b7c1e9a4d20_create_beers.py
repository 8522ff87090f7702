"""create beers

Revision ID: 3b7c1e9a4d20
Revises:
Create Date: 2026-10-19 10:40:12.481203
"""
from __future__ import annotations

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3b7c1e9a4d20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "beers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("max", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("quantity >= 0", name="ck_beers_quantity_non_negative"),
        sa.CheckConstraint('"max" > 0', name="ck_beers_max_positive"),
        sa.CheckConstraint('quantity <= "max"', name="ck_beers_quantity_within_max"),
    )
    op.create_index("ix_beers_name", "beers", ["name"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_beers_name", table_name="beers")
    op.drop_table("beers")
