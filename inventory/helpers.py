from __future__ import annotations
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from flask import Flask

CENTS = Decimal("0.01")


def format_price(value: Any) -> str:
    """Render a price with exactly two decimals; blank for missing or unparseable values."""
    if value is None or value == "":
        return ""
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return ""
    if not amount.is_finite():
        return ""
    amount = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"{amount:.2f}"


def equals(a: Any, b: Any) -> bool:
    """Strict equality, except that an int id and its decimal string (from a query string) match."""
    if type(a) is int and type(b) is str:
        return str(a) == b
    if type(a) is str and type(b) is int:
        return a == str(b)
    return type(a) is type(b) and a == b


def register_helpers(app: Flask) -> None:
    app.add_template_filter(format_price, "format_price")
    app.add_template_test(equals, "equals")
