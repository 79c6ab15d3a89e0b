"""create car insurance quotes table

Revision ID: 002
Revises: 001
Create Date: 2026-10-19 10:05:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "car_insurance_quotes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("age_of_driver", sa.Integer(), nullable=False),
        sa.Column("monthly_premium", sa.Numeric(12, 2), nullable=False),
        sa.Column("yearly_premium", sa.Numeric(12, 2), nullable=False),
        sa.Column("created_on", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_car_insurance_quotes_id", "car_insurance_quotes", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_car_insurance_quotes_id", table_name="car_insurance_quotes")
    op.drop_table("car_insurance_quotes")
