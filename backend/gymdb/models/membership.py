"""SQLAlchemy model for membership plans (``memberships`` table)."""
from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    JSON,
    Numeric,
    String,
    Text,
)
from sqlalchemy.sql import func

from gymdb.db.orm_registry import Base

# price is stored in VND; scale stays at 2 across every revision
PRICE_PRECISION = 12
LEGACY_PRICE_PRECISION = 10
PRICE_SCALE = 2
PRICE_COMMENT = "Price in VND (up to 9,999,999,999.99)"


class Membership(Base):
    __tablename__ = "memberships"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(Text)
    duration = Column(Integer, nullable=False, comment="Duration in days")
    price = Column(
        Numeric(PRICE_PRECISION, PRICE_SCALE),
        nullable=False,
        comment=PRICE_COMMENT,
    )
    benefits = Column(JSON, comment="Array of benefits")
    max_classes = Column(Integer, comment="Max classes per month, null = unlimited")
    has_personal_trainer = Column(Boolean, default=False)
    is_active = Column(Boolean, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Membership id={self.id} name={self.name!r} price={self.price}>"
