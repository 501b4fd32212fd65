from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class ProductFilter:
    """Optional search criteria; ``None`` means the filter is absent."""

    category_id: int | None = None
    min_price: float | None = None
    max_price: float | None = None
    keyword: str | None = None
    # set when a supplied value could not be coerced; such a filter matches no product
    unmatchable: bool = False


Predicate = Tuple[str, Dict[str, Any]]


def _escape_like(value: str) -> str:
    for ch in (LIKE_ESCAPE, "%", "_"):
        value = value.replace(ch, LIKE_ESCAPE + ch)
    return value


def build_predicates(filters: ProductFilter) -> List[Predicate]:
    """
    Ordered (condition, binds) pairs, one per present filter.
    Conditions are fixed SQL fragments; values only ever travel as binds.
    """
    predicates: List[Predicate] = []
    if filters.unmatchable:
        predicates.append(("1=0", {}))
    if filters.category_id is not None:
        predicates.append(("p.category_id = :category_id", {"category_id": filters.category_id}))
    if filters.min_price is not None:
        predicates.append(("p.price >= :min_price", {"min_price": filters.min_price}))
    if filters.max_price is not None:
        predicates.append(("p.price <= :max_price", {"max_price": filters.max_price}))
    if filters.keyword is not None:
        # case-insensitive on both Postgres and SQLite
        predicates.append(
            (
                "(lower(p.product_name) LIKE lower(:keyword) ESCAPE '\\'"
                " OR lower(p.description) LIKE lower(:keyword) ESCAPE '\\')",
                {"keyword": f"%{_escape_like(filters.keyword)}%"},
            )
        )
    return predicates


def build_product_query(base_sql: str, filters: ProductFilter) -> Tuple[TextClause, Dict[str, Any]]:
    clauses = ["1=1"]
    params: Dict[str, Any] = {}
    for condition, binds in build_predicates(filters):
        clauses.append(condition)
        params.update(binds)
    sql = f"{base_sql}\n WHERE {' AND '.join(clauses)}\n ORDER BY p.product_id DESC"
    return text(sql), params
