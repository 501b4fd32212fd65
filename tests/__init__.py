from __future__ import annotations
import os
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

ROOT = Path(__file__).resolve().parents[1]


def _migrate(url: str) -> None:
    cfg = Config(str(ROOT / "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", url)
    command.upgrade(cfg, "head")


@pytest.fixture(scope="session")
def db_url(tmp_path_factory) -> str:
    # TEST_DATABASE_URL points at an existing empty database; USE_TESTCONTAINERS=1 starts Postgres.
    explicit = os.getenv("TEST_DATABASE_URL")
    if explicit:
        _migrate(explicit)
        yield explicit
        return
    if os.getenv("USE_TESTCONTAINERS") == "1":
        from testcontainers.postgres import PostgresContainer

        with PostgresContainer("postgres:16", driver="psycopg") as pg:
            url = pg.get_connection_url()
            _migrate(url)
            yield url
        return
    url = f"sqlite:///{tmp_path_factory.mktemp('db') / 'inventory.db'}"
    _migrate(url)
    yield url


@pytest.fixture()
def engine_app(db_url: str) -> Engine:
    eng = create_engine(db_url, future=True, pool_pre_ping=True)
    with eng.begin() as conn:
        conn.execute(text("DELETE FROM products"))
    yield eng
    eng.dispose()
