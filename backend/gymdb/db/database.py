# backend/gymdb/db/database.py
from __future__ import annotations

from sqlalchemy import create_engine, pool
from sqlalchemy.engine import Engine

from gymdb.config import DatabaseConfig


# ---- one-shot engines (scripts / alembic) ----
# NullPool: every script opens its own connection and closes it before exiting.
def create_app_engine(config: DatabaseConfig) -> Engine:
    """Engine bound to the application database (``DB_NAME``)."""
    return create_engine(
        config.url(),
        echo=False,
        future=True,
        poolclass=pool.NullPool,
    )


def create_server_engine(config: DatabaseConfig) -> Engine:
    """
    Engine bound to the server's ``postgres`` maintenance database.
    AUTOCOMMIT because ``CREATE DATABASE`` cannot run inside a transaction block.
    """
    return create_engine(
        config.server_url(),
        echo=False,
        future=True,
        poolclass=pool.NullPool,
        isolation_level="AUTOCOMMIT",
    )
