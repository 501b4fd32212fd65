from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Mapping

from sqlalchemy.engine import URL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "ecommerce_inventory"
    port: int = 3000
    database_url_override: str | None = None  # DATABASE_URL wins over the DB_* parts
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            db_host=env.get("DB_HOST", cls.db_host),
            db_port=int(env.get("DB_PORT", cls.db_port)),
            db_user=env.get("DB_USER", cls.db_user),
            db_password=env.get("DB_PASSWORD", cls.db_password),
            db_name=env.get("DB_NAME", cls.db_name),
            port=int(env.get("PORT", cls.port)),
            database_url_override=env.get("DATABASE_URL") or None,
            log_level=env.get("LOG_LEVEL", cls.log_level).upper(),
        )

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        url = URL.create(
            "postgresql+psycopg",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
