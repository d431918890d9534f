"""create memberships table

Revision ID: 5f0d2c7a9e14
Revises:
Create Date: 2025-08-10 09:12:41.327905
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5f0d2c7a9e14"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema: create memberships table (price NUMERIC(10,2))."""
    op.create_table(
        "memberships",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=False, comment="Duration in days"),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("benefits", sa.JSON(), nullable=True, comment="Array of benefits"),
        sa.Column("max_classes", sa.Integer(), nullable=True, comment="Max classes per month, null = unlimited"),
        sa.Column("has_personal_trainer", sa.Boolean(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    )


def downgrade() -> None:
    """Downgrade schema: drop memberships table."""
    op.drop_table("memberships")
