# backend/gymdb/bootstrap.py
"""
Create the application database on a PostgreSQL server if it is missing.

- Connects to the server's built-in ``postgres`` database (AUTOCOMMIT).
- ``CREATE DATABASE <name>``; a duplicate-database error counts as success.
- Every failure is logged and folded into a :class:`CreateOutcome`; nothing is
  raised to the caller except bugs outside the DBAPI error hierarchy.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from psycopg2 import errorcodes, errors
from sqlalchemy.dialects import postgresql
from sqlalchemy.engine import Engine
from sqlalchemy.exc import ArgumentError, DBAPIError, InterfaceError, OperationalError

from gymdb.config import DatabaseConfig
from gymdb.db.database import create_server_engine

LOGGER = logging.getLogger(__name__)

_PG_PREPARER = postgresql.dialect().identifier_preparer


class CreateOutcome(Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    CONNECTION_FAILED = "connection_failed"
    FAILED = "failed"

    @property
    def ok(self) -> bool:
        return self in (CreateOutcome.CREATED, CreateOutcome.ALREADY_EXISTS)


def quote_database_name(name: str) -> str:
    """
    PostgreSQL identifier quoting.
    Plain lower-case names come back bare (``app_test`` -> ``app_test``);
    anything else is double-quoted with embedded quotes doubled.
    """
    return _PG_PREPARER.quote(name)


def is_duplicate_database(exc: DBAPIError) -> bool:
    """True when the driver reports SQLSTATE 42P04 (duplicate_database)."""
    orig = exc.orig
    if isinstance(orig, errors.DuplicateDatabase):
        return True
    return getattr(orig, "pgcode", None) == errorcodes.DUPLICATE_DATABASE


def _driver_message(exc: DBAPIError) -> str:
    if exc.orig is not None:
        return str(exc.orig).strip()
    return str(exc)


def create_database(
    config: DatabaseConfig,
    engine_factory: Callable[[DatabaseConfig], Engine] = create_server_engine,
) -> CreateOutcome:
    name = config.name
    LOGGER.info("🔗 Creating database...")
    if not name:
        LOGGER.error("❌ Error creating database: DB_NAME is not set")
        return CreateOutcome.FAILED

    try:
        engine = engine_factory(config)
    except (ArgumentError, ValueError) as exc:
        # settings the driver cannot even build a URL from (e.g. DB_PORT=abc)
        LOGGER.error("❌ Unable to connect to PostgreSQL server: %s", exc)
        return CreateOutcome.CONNECTION_FAILED

    try:
        try:
            conn = engine.connect()
        except (OperationalError, InterfaceError) as exc:
            LOGGER.error("❌ Unable to connect to PostgreSQL server: %s", _driver_message(exc))
            return CreateOutcome.CONNECTION_FAILED

        with conn:
            LOGGER.info("✅ Connected to PostgreSQL server")
            try:
                conn.exec_driver_sql(f"CREATE DATABASE {quote_database_name(name)}")
            except DBAPIError as exc:
                if is_duplicate_database(exc):
                    LOGGER.info("✅ Database '%s' already exists!", name)
                    return CreateOutcome.ALREADY_EXISTS
                LOGGER.error("❌ Error creating database: %s", _driver_message(exc))
                return CreateOutcome.FAILED

        LOGGER.info("✅ Database '%s' created successfully!", name)
        return CreateOutcome.CREATED
    finally:
        # releases the server connection on every path
        engine.dispose()


__all__ = [
    "CreateOutcome",
    "create_database",
    "is_duplicate_database",
    "quote_database_name",
]
