# backend/gymdb/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from sqlalchemy.engine import URL

DRIVER = "postgresql+psycopg2"
# built-in maintenance database every PostgreSQL server ships with
SERVER_DATABASE = "postgres"


@dataclass(frozen=True)
class DatabaseConfig:
    """Connection settings read once at process entry and passed down explicitly."""

    host: Optional[str]
    port: Union[int, str, None]
    user: Optional[str]
    password: Optional[str]
    name: Optional[str]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DatabaseConfig":
        """
        Build the config from ``DB_HOST`` / ``DB_PORT`` / ``DB_USER`` /
        ``DB_PASSWORD`` / ``DB_NAME``.
        - No defaults, no validation: values are kept as given (a missing one
          stays ``None``) and problems surface when a connection is attempted.
        - ``.env`` loading is the caller's job (scripts call ``load_dotenv``).
        """
        env = os.environ if environ is None else environ
        return cls(
            host=env.get("DB_HOST"),
            port=env.get("DB_PORT"),
            user=env.get("DB_USER"),
            password=env.get("DB_PASSWORD"),
            name=env.get("DB_NAME"),
        )

    def url(self, database: Optional[str] = None) -> URL:
        """Raises ``ValueError`` when ``port`` is not a number."""
        return URL.create(
            DRIVER,
            username=self.user,
            password=self.password,
            host=self.host,
            port=int(self.port) if self.port else None,
            database=database if database is not None else self.name,
        )

    def server_url(self) -> URL:
        return self.url(database=SERVER_DATABASE)


__all__ = ["DatabaseConfig", "DRIVER", "SERVER_DATABASE"]
