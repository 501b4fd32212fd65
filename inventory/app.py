from __future__ import annotations
import functools
import logging
from typing import Any, Callable

from flask import Blueprint, Flask, Response, redirect, render_template, request, url_for
from werkzeug.exceptions import HTTPException

from inventory.config import Settings
from inventory.db import ENGINE_KEY, close_conn, create_db_engine, get_conn
from inventory.forms import parse_product_form, parse_search_args
from inventory.helpers import register_helpers
from inventory.services import products as product_service

logger = logging.getLogger(__name__)

bp = Blueprint("products", __name__)


def _plain(message: str, status: int) -> Response:
    return Response(message, status=status, mimetype="text/plain")


def fails_with(message: str) -> Callable:
    """Turn any unexpected error in the view into a generic 500; details only go to the log."""

    def decorator(view: Callable) -> Callable:
        @functools.wraps(view)
        def wrapper(*args: Any, **kwargs: Any):
            try:
                return view(*args, **kwargs)
            except HTTPException:
                raise
            except Exception:
                logger.exception("%s %s failed", request.method, request.path)
                return _plain(message, 500)

        return wrapper

    return decorator


def _back_to_listing(message: str):
    return redirect(url_for("products.index", message=message))


@bp.get("/")
@fails_with("Error fetching products")
def index():
    conn = get_conn()
    products = product_service.list_products(conn)
    categories = product_service.list_categories(conn)
    return render_template(
        "products/index.html",
        title="Product Inventory",
        products=products,
        categories=categories,
        search_params={},
        message=request.args.get("message"),
    )


@bp.get("/products/search")
@fails_with("Error searching products")
def search():
    conn = get_conn()
    products = product_service.list_products(conn, parse_search_args(request.args))
    categories = product_service.list_categories(conn)
    return render_template(
        "products/index.html",
        title="Search Results",
        products=products,
        categories=categories,
        search_params=request.args.to_dict(),
    )


@bp.get("/products/create")
@fails_with("Error loading form")
def create_form():
    conn = get_conn()
    return render_template(
        "products/create.html",
        title="Add New Product",
        categories=product_service.list_categories(conn),
        suppliers=product_service.list_suppliers(conn),
    )


@bp.post("/products/create")
@fails_with("Error creating product")
def create_submit():
    try:
        fields = parse_product_form(request.form)
    except ValueError as exc:
        return _plain(str(exc), 400)
    product_service.create_product(get_conn(), fields)
    return _back_to_listing("Product added successfully")


@bp.get("/products/edit/<int:product_id>")
@fails_with("Error loading edit form")
def edit_form(product_id: int):
    conn = get_conn()
    product = product_service.get_product(conn, product_id)
    if product is None:
        return _plain("Product not found", 404)
    return render_template(
        "products/edit.html",
        title="Edit Product",
        product=product,
        categories=product_service.list_categories(conn),
        suppliers=product_service.list_suppliers(conn),
    )


@bp.post("/products/edit/<int:product_id>")
@fails_with("Error updating product")
def edit_submit(product_id: int):
    try:
        fields = parse_product_form(request.form)
    except ValueError as exc:
        return _plain(str(exc), 400)
    product_service.update_product(get_conn(), product_id, fields)
    return _back_to_listing("Product updated successfully")


@bp.get("/products/delete/<int:product_id>")
@fails_with("Error loading delete confirmation")
def delete_confirm(product_id: int):
    product = product_service.get_product(get_conn(), product_id)
    if product is None:
        return _plain("Product not found", 404)
    return render_template("products/delete.html", title="Delete Product", product=product)


@bp.post("/products/delete/<int:product_id>")
@fails_with("Error deleting product")
def delete_submit(product_id: int):
    product_service.delete_product(get_conn(), product_id)
    return _back_to_listing("Product deleted successfully")


def create_app(settings: Settings | None = None) -> Flask:
    settings = settings or Settings.from_env()
    app = Flask(__name__)
    app.config["INVENTORY_SETTINGS"] = settings
    app.extensions[ENGINE_KEY] = create_db_engine(settings)
    app.teardown_appcontext(close_conn)
    register_helpers(app)
    app.register_blueprint(bp)
    return app
