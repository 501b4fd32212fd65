from __future__ import annotations

import pytest

from inventory.app import create_app
from inventory.config import Settings
from inventory.db import ENGINE_KEY, dispose_engine
from tests import db_url, engine_app  # re-export fixtures for pytest discovery


@pytest.fixture()
def flask_app(engine_app, db_url: str):
    app = create_app(Settings(database_url_override=db_url))
    app.config["TESTING"] = True
    yield app
    dispose_engine(app.extensions[ENGINE_KEY])


@pytest.fixture()
def api_client(flask_app):
    return flask_app.test_client()
