# backend/gymdb/db/orm_registry.py
from __future__ import annotations

from sqlalchemy.orm import declarative_base

# single Base every ORM model inherits from
Base = declarative_base()


def import_all_models() -> None:
    """
    Register every model on ``Base.metadata`` (Alembic env reads it as target_metadata).
    Imported lazily: the model modules import ``Base`` from here.
    """
    import gymdb.models.membership  # noqa: F401


__all__ = ["Base", "import_all_models"]
