# backend/gymdb/db/__init__.py
from .database import create_app_engine, create_server_engine
from .orm_registry import Base, import_all_models

__all__ = [
    "Base",
    "create_app_engine",
    "create_server_engine",
    "import_all_models",
]
