"""Initial schema — products table.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "products",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("price", sa.Numeric(18, 2), nullable=False),
        sa.Column("picture_url", sa.Text, nullable=False),
        sa.Column("type", sa.Text, nullable=False),
        sa.Column("brand", sa.Text, nullable=False),
        sa.Column("quantity_in_stock", sa.Integer, nullable=False, server_default="0"),
    )
    # Brand and type listings select DISTINCT over these columns.
    op.create_index("ix_products_brand", "products", ["brand"])
    op.create_index("ix_products_type", "products", ["type"])


def downgrade() -> None:
    op.drop_index("ix_products_type", table_name="products")
    op.drop_index("ix_products_brand", table_name="products")
    op.drop_table("products")
