# backend/gymdb/models/__init__.py
from .membership import (
    LEGACY_PRICE_PRECISION,
    PRICE_COMMENT,
    PRICE_PRECISION,
    PRICE_SCALE,
    Membership,
)

__all__ = [
    "LEGACY_PRICE_PRECISION",
    "Membership",
    "PRICE_COMMENT",
    "PRICE_PRECISION",
    "PRICE_SCALE",
]
