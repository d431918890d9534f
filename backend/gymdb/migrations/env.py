from logging.config import fileConfig
from alembic import context
from sqlalchemy import create_engine
from sqlalchemy import pool

from dotenv import find_dotenv, load_dotenv

# model metadata
from gymdb.config import DatabaseConfig
from gymdb.db.orm_registry import Base, import_all_models

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

import_all_models()
target_metadata = Base.metadata


def _database_url() -> str:
    """Explicit ``sqlalchemy.url`` first, then DB_* variables (.env in the working directory)."""
    url = config.get_main_option("sqlalchemy.url")
    if url:
        return url
    load_dotenv(find_dotenv(usecwd=True), override=False)
    db = DatabaseConfig.from_env()
    if not db.name:
        raise RuntimeError("DB_NAME not set")
    return db.url().render_as_string(hide_password=False)


def run_migrations_offline():
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = create_engine(_database_url(), poolclass=pool.NullPool, future=True)
    try:
        with connectable.connect() as connection:
            context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
