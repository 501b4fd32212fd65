from __future__ import annotations
import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Order matters: products references both lookup tables
    op.create_table(
        "categories",
        sa.Column("category_id", sa.Integer, primary_key=True),
        sa.Column("category_name", sa.String(100), nullable=False),
    )
    op.create_table(
        "suppliers",
        sa.Column("supplier_id", sa.Integer, primary_key=True),
        sa.Column("supplier_name", sa.String(150), nullable=False),
    )
    op.create_table(
        "products",
        sa.Column("product_id", sa.Integer, primary_key=True),
        sa.Column("product_name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("stock_quantity", sa.Integer, nullable=False, server_default="0"),
        sa.Column("category_id", sa.Integer, sa.ForeignKey("categories.category_id"), nullable=True),
        sa.Column("supplier_id", sa.Integer, sa.ForeignKey("suppliers.supplier_id"), nullable=True),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_products_category_id", "products", ["category_id"])
    op.create_index("ix_products_price", "products", ["price"])


def downgrade() -> None:
    op.drop_index("ix_products_price", table_name="products")
    op.drop_index("ix_products_category_id", table_name="products")
    op.drop_table("products")
    op.drop_table("suppliers")
    op.drop_table("categories")
