"""Add products table for the catalog.

Revision ID: 20250301100000
Revises: 20250301000000
Create Date: 2025-03-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20250301100000"
down_revision: Union[str, None] = "20250301000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("prod_name", sa.String(length=50), nullable=True),
        sa.Column("prod_price", sa.Float(), nullable=True),
        sa.Column("prod_desc", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_products_prod_name"), "products", ["prod_name"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_products_prod_name"), table_name="products")
    op.drop_table("products")
