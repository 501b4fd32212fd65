from __future__ import annotations
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from sqlalchemy.engine import Connection

from inventory.db import SQL, SQL_RAW, simple_transaction
from inventory.services.search import ProductFilter, build_product_query

logger = logging.getLogger(__name__)

# largest signed 64-bit id; anything bigger cannot match a row and overflows the driver
MAX_ID = 2**63 - 1


@dataclass(frozen=True)
class ProductFields:
    """Every mutable column of a product; updates always overwrite all of them."""

    product_name: str | None
    description: str | None
    price: float
    stock_quantity: int
    category_id: int | None = None
    supplier_id: int | None = None


def list_products(conn: Connection, filters: ProductFilter | None = None) -> List[Dict[str, Any]]:
    stmt, params = build_product_query(SQL_RAW["product_listing"], filters or ProductFilter())
    return [dict(row) for row in conn.execute(stmt, params).mappings()]


def list_categories(conn: Connection) -> List[Dict[str, Any]]:
    return [dict(row) for row in conn.execute(SQL["list_categories"]).mappings()]


def list_suppliers(conn: Connection) -> List[Dict[str, Any]]:
    return [dict(row) for row in conn.execute(SQL["list_suppliers"]).mappings()]


def get_product(conn: Connection, product_id: int) -> Dict[str, Any] | None:
    if product_id > MAX_ID:
        return None
    row = conn.execute(SQL["product_by_id"], {"product_id": product_id}).mappings().first()
    return dict(row) if row is not None else None


def create_product(conn: Connection, fields: ProductFields) -> None:
    with simple_transaction(conn):
        conn.execute(SQL["insert_product"], asdict(fields))
    logger.info("Created product %r", fields.product_name)


def update_product(conn: Connection, product_id: int, fields: ProductFields) -> int:
    """Returns the affected row count; callers treat zero as success."""
    if product_id > MAX_ID:
        return 0
    with simple_transaction(conn):
        result = conn.execute(SQL["update_product"], {**asdict(fields), "product_id": product_id})
    logger.info("Updated product %s (%d row(s))", product_id, result.rowcount)
    return result.rowcount


def delete_product(conn: Connection, product_id: int) -> int:
    if product_id > MAX_ID:
        return 0
    with simple_transaction(conn):
        result = conn.execute(SQL["delete_product"], {"product_id": product_id})
    logger.info("Deleted product %s (%d row(s))", product_id, result.rowcount)
    return result.rowcount
