"""Create programs table

Revision ID: 3c9e1b7a4d20
Revises:
Create Date: 2026-10-18 10:42:07.311904

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c9e1b7a4d20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "programs",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("schedule", sa.String(length=255), nullable=False),
        sa.Column("age_range", sa.String(length=100), nullable=False),
        sa.Column("price", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("pricing_period", sa.String(length=100), nullable=False),
        sa.Column("spots_available", sa.Integer(), nullable=False),
        sa.Column("gradient_class", sa.String(length=255), nullable=True),
        sa.Column("icon_path", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint("price >= 0", name="programs_price_non_negative"),
        sa.CheckConstraint("spots_available >= 0", name="programs_spots_non_negative"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_programs_title_id", "programs", ["title", "id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_programs_title_id", table_name="programs")
    op.drop_table("programs")
