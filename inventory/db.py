from __future__ import annotations
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from flask import current_app, g
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.sql.elements import TextClause

from inventory.config import Settings

logger = logging.getLogger(__name__)

ENGINE_KEY = "inventory.engine"
SQL_DIR = Path(__file__).resolve().parent / "queries"


def _load_named_sql(path: Path) -> dict[str, str]:
    """
    Tiny parser for a single .sql file that contains multiple statements,
    each prefixed with a line:  `-- name: <key>`
    Returns a dict {key: sql_text}.
    """
    content = path.read_text(encoding="utf-8")
    blocks: dict[str, str] = {}
    current: str | None = None
    buf: list[str] = []
    for line in content.splitlines():
        if line.startswith("-- name:"):
            if current is not None:
                blocks[current] = "\n".join(buf).strip()
                buf = []
            current = line.split(":", 1)[1].strip()
        else:
            buf.append(line)
    if current is not None:
        blocks[current] = "\n".join(buf).strip()
    return blocks


SQL_RAW = _load_named_sql(SQL_DIR / "products.sql")
SQL: dict[str, TextClause] = {name: text(stmt) for name, stmt in SQL_RAW.items()}


def create_db_engine(settings: Settings) -> Engine:
    # Pool sizing is left to the driver defaults.
    return create_engine(settings.database_url, future=True, pool_pre_ping=True)


def dispose_engine(engine: Engine) -> None:
    logger.info("Releasing database pool")
    engine.dispose()


def get_conn() -> Connection:
    """Connection for the current request, checked out of the pool on first use."""
    conn: Connection | None = g.get("db")
    if conn is None:
        engine: Engine = current_app.extensions[ENGINE_KEY]
        conn = engine.connect()
        g.db = conn
    return conn


def close_conn(exc: BaseException | None = None) -> None:
    conn: Connection | None = g.pop("db", None)
    if conn is not None:
        conn.close()


@contextmanager
def simple_transaction(conn: Connection) -> Iterator[Connection]:
    if conn.in_transaction():
        conn.rollback()
    with conn.begin():
        yield conn
