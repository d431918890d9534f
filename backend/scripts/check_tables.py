# -*- coding: utf-8 -*-
"""
List the tables of the application database and show how memberships.price
is currently declared (handy before/after running the precision migration).

Exits 1 when the database cannot be reached.
"""
from __future__ import annotations

import os
import logging

from dotenv import load_dotenv
load_dotenv(dotenv_path=os.path.join(os.path.dirname(os.path.dirname(__file__)), ".env"), override=False)

from sqlalchemy.exc import DBAPIError

from gymdb.config import DatabaseConfig
from gymdb.db.database import create_app_engine
from gymdb.db.schema_check import describe_column, list_tables

log = logging.getLogger("check-tables")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s | %(message)s")
    log.info("🔍 Checking database tables...")
    try:
        engine = create_app_engine(DatabaseConfig.from_env())
    except ValueError as exc:
        log.error("❌ Error checking tables: %s", exc)
        return 1

    try:
        tables = list_tables(engine)
        log.info("📋 Database tables:")
        for name in tables:
            log.info("   - %s", name)

        col = describe_column(engine, "memberships", "price")
        if col is None:
            log.info("💵 memberships.price: ❌ not found")
        else:
            log.info(
                "💵 memberships.price: %s nullable=%s comment=%r",
                col["type"], col["nullable"], col.get("comment"),
            )
    except DBAPIError as exc:
        log.error("❌ Error checking tables: %s", exc.orig if exc.orig is not None else exc)
        return 1
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
