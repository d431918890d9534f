# -*- coding: utf-8 -*-
"""
Create the application database (DB_NAME) if it does not exist yet.

Usage:
  python backend/scripts/create_db.py

Reads DB_HOST / DB_PORT / DB_USER / DB_PASSWORD / DB_NAME from the environment
or backend/.env. Exits 0 once the attempt settles, whatever the outcome.
"""
from __future__ import annotations

import os
import logging

from dotenv import load_dotenv
load_dotenv(dotenv_path=os.path.join(os.path.dirname(os.path.dirname(__file__)), ".env"), override=False)

from gymdb.bootstrap import create_database
from gymdb.config import DatabaseConfig

LOGGER = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s | %(message)s")
    config = DatabaseConfig.from_env()
    outcome = create_database(config)
    LOGGER.debug("create_database outcome=%s", outcome.value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
