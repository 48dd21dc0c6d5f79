"""create quotations table

Revision ID: 001
Revises:
Create Date: 2026-10-05 10:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "quotations",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("pet_name", sa.String(), nullable=False),
        sa.Column("species", sa.String(), nullable=False),
        sa.Column("breed", sa.String(), nullable=True),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column("premium_plan", sa.Boolean(), nullable=False),
        sa.Column("price", sa.Numeric(precision=12, scale=4), nullable=False),
        sa.Column("expires_at", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        # Mirrors the domain invariants so bad rows cannot be written behind the app's back
        sa.CheckConstraint("age >= 0 AND age <= 10", name="ck_quotations_age_range"),
        sa.CheckConstraint("price >= 0", name="ck_quotations_price_non_negative"),
    )
    op.create_index("ix_quotations_id", "quotations", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_quotations_id", table_name="quotations")
    op.drop_table("quotations")
