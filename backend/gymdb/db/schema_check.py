# backend/gymdb/db/schema_check.py
"""Read-only helpers that reflect what the live schema actually declares."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine


def list_tables(engine: Engine, schema: Optional[str] = None) -> List[str]:
    return sorted(inspect(engine).get_table_names(schema=schema))


def describe_column(
    engine: Engine,
    table: str,
    column: str,
    schema: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """
    Return the reflected column dict (``name``, ``type``, ``nullable``,
    ``comment``...) or ``None`` if the table or the column does not exist.
    """
    insp = inspect(engine)
    if not insp.has_table(table, schema=schema):
        return None
    for col in insp.get_columns(table, schema=schema):
        if col["name"] == column:
            return col
    return None


__all__ = ["describe_column", "list_tables"]
