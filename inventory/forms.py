from __future__ import annotations
import logging
import math
from typing import Any, Mapping

from inventory.services.products import MAX_ID, ProductFields
from inventory.services.search import ProductFilter

logger = logging.getLogger(__name__)


def _parse_float(value: Any, field: str) -> float:
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{field} must be numeric") from exc
    if not math.isfinite(number):
        raise ValueError(f"{field} must be numeric")
    return number


def _parse_int(value: Any, field: str) -> int:
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{field} must be an integer") from exc
    if abs(number) > MAX_ID:
        raise ValueError(f"{field} is out of range")
    return number


def _optional_id(value: Any, field: str) -> int | None:
    if value is None or str(value).strip() == "":
        return None
    return _parse_int(value, field)


def parse_product_form(form: Mapping[str, Any]) -> ProductFields:
    """Coerce a submitted create/edit form; empty category or supplier become NULL."""
    return ProductFields(
        product_name=form.get("product_name"),
        description=form.get("description"),
        price=_parse_float(form.get("price"), "price"),
        stock_quantity=_parse_int(form.get("stock_quantity"), "stock_quantity"),
        category_id=_optional_id(form.get("category_id"), "category_id"),
        supplier_id=_optional_id(form.get("supplier_id"), "supplier_id"),
    )


def parse_search_args(args: Mapping[str, Any]) -> ProductFilter:
    """
    Search filters never reject a request: a value that cannot be coerced
    (``category_id=books``, ``min_price=cheap``) simply matches no product.
    """
    values: dict[str, Any] = {}
    unmatchable = False
    for field, parse in (("category_id", _optional_id), ("min_price", _parse_float), ("max_price", _parse_float)):
        raw = args.get(field)
        if not raw:
            continue
        try:
            values[field] = parse(raw, field)
        except ValueError:
            logger.info("Search filter %s=%r matches nothing", field, raw)
            unmatchable = True
    return ProductFilter(keyword=args.get("keyword") or None, unmatchable=unmatchable, **values)
