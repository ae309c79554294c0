"""init bars

Revision ID: 20261012_init_bars
Revises:
Create Date: 2026-10-12 10:14:03

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20261012_init_bars"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "bars",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("website", sa.Text(), nullable=True),
        sa.Column("featured_image", sa.Text(), nullable=True),
        sa.Column("logo", sa.Text(), nullable=True),
        sa.Column("price", sa.String(), nullable=True),
        sa.Column("age_restriction", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_facilitated", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("activities", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("servings", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("opening_hours", sa.Text(), nullable=True),
        sa.Column("lat", sa.Numeric(9, 6), nullable=True),
        sa.Column("lon", sa.Numeric(9, 6), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_bars_name", "bars", ["name"])

    op.create_table(
        "activities",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=80), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_activity_name"),
    )

    op.create_table(
        "servings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=80), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_serving_name"),
    )


def downgrade() -> None:
    op.drop_table("servings")
    op.drop_table("activities")
    op.drop_index("ix_bars_name", table_name="bars")
    op.drop_table("bars")
