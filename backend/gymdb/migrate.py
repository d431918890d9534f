# backend/gymdb/migrate.py
"""Programmatic entry points for the Alembic migrations shipped in ``gymdb/migrations``."""
from __future__ import annotations

from pathlib import Path
from typing import IO, Optional, Union

from alembic import command
from alembic.config import Config
from sqlalchemy.engine import URL

from gymdb.config import DatabaseConfig

# shipped as package data, so this resolves in a checkout and in site-packages alike
MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


def _render_url(url: Union[str, URL]) -> str:
    if isinstance(url, URL):
        url = url.render_as_string(hide_password=False)
    # ConfigParser interpolation: a literal % must be doubled
    return url.replace("%", "%%")


def alembic_config(
    config: Optional[DatabaseConfig] = None,
    url: Union[str, URL, None] = None,
    output_buffer: Optional[IO[str]] = None,
) -> Config:
    """
    Alembic ``Config`` wired to this package's migration scripts.
    - ``url`` wins over ``config``.
    - A ``config`` without ``name`` sets no URL, so ``env.py`` refuses to run
      instead of migrating whatever database the server defaults to.
    """
    if not (MIGRATIONS_DIR / "env.py").is_file():
        raise RuntimeError(f"migration scripts not found under {MIGRATIONS_DIR}")

    cfg = Config(output_buffer=output_buffer)
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    if url is None and config is not None and config.name:
        url = config.url()
    if url is not None:
        cfg.set_main_option("sqlalchemy.url", _render_url(url))
    return cfg


# Errors from the migration scripts are not caught here; Alembic surfaces them.
def upgrade(cfg: Config, revision: str = "head", sql: bool = False) -> None:
    command.upgrade(cfg, revision, sql=sql)


def downgrade(cfg: Config, revision: str = "-1", sql: bool = False) -> None:
    command.downgrade(cfg, revision, sql=sql)


def current(cfg: Config, verbose: bool = False) -> None:
    command.current(cfg, verbose=verbose)


__all__ = ["MIGRATIONS_DIR", "alembic_config", "current", "downgrade", "upgrade"]
