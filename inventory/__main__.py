from __future__ import annotations
import logging

from inventory.app import create_app
from inventory.config import Settings, configure_logging
from inventory.db import ENGINE_KEY, dispose_engine

logger = logging.getLogger("inventory")


def main() -> None:
    app = create_app()
    settings: Settings = app.config["INVENTORY_SETTINGS"]
    configure_logging(settings)
    logger.info("Server running on http://localhost:%d", settings.port)
    logger.info("Database connected to: %s", settings.db_name)
    try:
        app.run("0.0.0.0", settings.port)
    finally:
        dispose_engine(app.extensions[ENGINE_KEY])


if __name__ == "__main__":
    main()
