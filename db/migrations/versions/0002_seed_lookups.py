from __future__ import annotations
import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "0002_seed_lookups"
down_revision = "0001_init"
branch_labels = None
depends_on = None

CATEGORIES = ["Electronics", "Clothing", "Home & Kitchen", "Books", "Sports & Outdoors"]
SUPPLIERS = ["Acme Distribution", "Global Goods Ltd", "Northwind Traders", "Pacific Imports"]

categories = sa.table("categories", sa.column("category_id", sa.Integer), sa.column("category_name", sa.String))
suppliers = sa.table("suppliers", sa.column("supplier_id", sa.Integer), sa.column("supplier_name", sa.String))


def upgrade() -> None:
    # The app has no routes for lookups, so ship a starter set.
    op.bulk_insert(
        categories,
        [{"category_id": i, "category_name": name} for i, name in enumerate(CATEGORIES, start=1)],
    )
    op.bulk_insert(
        suppliers,
        [{"supplier_id": i, "supplier_name": name} for i, name in enumerate(SUPPLIERS, start=1)],
    )
    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        # explicit ids above leave the serial sequences behind
        op.execute("SELECT setval(pg_get_serial_sequence('categories', 'category_id'), (SELECT max(category_id) FROM categories))")
        op.execute("SELECT setval(pg_get_serial_sequence('suppliers', 'supplier_id'), (SELECT max(supplier_id) FROM suppliers))")


def downgrade() -> None:
    op.execute(suppliers.delete().where(suppliers.c.supplier_id.in_(list(range(1, len(SUPPLIERS) + 1)))))
    op.execute(categories.delete().where(categories.c.category_id.in_(list(range(1, len(CATEGORIES) + 1)))))
