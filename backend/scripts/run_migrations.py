# -*- coding: utf-8 -*-
"""
Apply or roll back the schema migrations.

Usage:
  python backend/scripts/run_migrations.py upgrade            # -> head
  python backend/scripts/run_migrations.py downgrade          # one step back
  python backend/scripts/run_migrations.py downgrade base
  python backend/scripts/run_migrations.py upgrade head --sql # print DDL only
  python backend/scripts/run_migrations.py current
"""
from __future__ import annotations

import os
import argparse
import logging

from dotenv import load_dotenv
load_dotenv(dotenv_path=os.path.join(os.path.dirname(os.path.dirname(__file__)), ".env"), override=False)

from gymdb import migrate
from gymdb.config import DatabaseConfig


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="gymdb schema migrations (Alembic)")
    sub = ap.add_subparsers(dest="action", required=True)

    up = sub.add_parser("upgrade", help="apply migrations up to a revision")
    up.add_argument("revision", nargs="?", default="head")
    up.add_argument("--sql", action="store_true", help="emit SQL instead of executing it")

    down = sub.add_parser("downgrade", help="revert migrations down to a revision")
    down.add_argument("revision", nargs="?", default="-1")
    down.add_argument("--sql", action="store_true", help="emit SQL instead of executing it (needs a from:to range)")

    cur = sub.add_parser("current", help="show the current revision")
    cur.add_argument("-v", "--verbose", action="store_true")

    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s | %(message)s")

    cfg = migrate.alembic_config(DatabaseConfig.from_env())
    if args.action == "upgrade":
        migrate.upgrade(cfg, args.revision, sql=args.sql)
    elif args.action == "downgrade":
        migrate.downgrade(cfg, args.revision, sql=args.sql)
    else:
        migrate.current(cfg, verbose=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
