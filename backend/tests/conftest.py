"""
gymdb Test Configuration
========================
Shared pytest fixtures for the bootstrap, migration and schema-check tests.

Nothing here talks to a real PostgreSQL server:
- engines handed to the bootstrapper are ``MagicMock`` fakes
- migrations are exercised through a recording ``op`` or Alembic offline mode
- schema reflection runs against in-memory SQLite
"""
import importlib.util
import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from alembic.script import ScriptDirectory
from sqlalchemy.engine import Engine

# Add backend/ to the path so the checkout works without an install
BACKEND_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(BACKEND_DIR))

from gymdb.config import DatabaseConfig
from gymdb.migrate import alembic_config

BASELINE_REVISION = "5f0d2c7a9e14"
PRICE_REVISION = "a3c9e1f27b5d"


# ============================================================
# Configuration Fixtures
# ============================================================

@pytest.fixture
def db_env() -> dict:
    return {
        "DB_HOST": "localhost",
        "DB_PORT": "5432",
        "DB_USER": "postgres",
        "DB_PASSWORD": "secret",
        "DB_NAME": "app_test",
    }


@pytest.fixture
def db_config(db_env) -> DatabaseConfig:
    return DatabaseConfig.from_env(db_env)


# ============================================================
# Fake Engine Fixtures
# ============================================================

@pytest.fixture
def fake_conn() -> MagicMock:
    """Connection double; supports ``with conn:`` like a SQLAlchemy Connection."""
    return MagicMock(name="Connection")


@pytest.fixture
def fake_engine(fake_conn) -> MagicMock:
    engine = MagicMock(spec=Engine, name="Engine")
    engine.connect.return_value = fake_conn
    return engine


@pytest.fixture
def engine_factory(fake_engine) -> MagicMock:
    """Stand-in for ``create_server_engine``; records the config it was given."""
    return MagicMock(name="engine_factory", return_value=fake_engine)


# ============================================================
# Alembic Fixtures
# ============================================================

@pytest.fixture
def script_directory() -> ScriptDirectory:
    return ScriptDirectory.from_config(alembic_config())


@pytest.fixture
def price_migration(script_directory):
    """The imported revision module that widens memberships.price."""
    return script_directory.get_revision(PRICE_REVISION).module


# ============================================================
# Script Loading
# ============================================================

def load_script(name: str):
    """Import ``backend/scripts/<name>.py`` as a module (scripts is not a package)."""
    path = os.path.join(BACKEND_DIR, "scripts", f"{name}.py")
    spec = importlib.util.spec_from_file_location(f"gymdb_scripts_{name}", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
