"""increase membership price precision

Revision ID: a3c9e1f27b5d
Revises: 5f0d2c7a9e14
Create Date: 2025-08-21 20:29:59.114208

"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# rev ids
revision: str = "a3c9e1f27b5d"
down_revision: Union[str, None] = "5f0d2c7a9e14"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PRICE_COMMENT = "Price in VND (up to 9,999,999,999.99)"


def upgrade() -> None:
    # VND amounts overflow NUMERIC(10,2); widen precision, scale stays 2
    op.alter_column(
        "memberships",
        "price",
        type_=sa.Numeric(12, 2),
        existing_type=sa.Numeric(10, 2),
        nullable=False,
        comment=PRICE_COMMENT,
        existing_comment=None,
    )


def downgrade() -> None:
    op.alter_column(
        "memberships",
        "price",
        type_=sa.Numeric(10, 2),
        existing_type=sa.Numeric(12, 2),
        nullable=False,
        comment=None,
        existing_comment=PRICE_COMMENT,
    )
