"""create car brands table

Revision ID: 001
Revises:
Create Date: 2026-10-19 10:00:00.000000

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
    car_brands = op.create_table(
        "car_brands",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("minimum_driver_age", sa.Integer(), nullable=False),
        sa.Column("yearly_premium", sa.Numeric(12, 2), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        sa.CheckConstraint("minimum_driver_age >= 0", name="ck_car_brands_minimum_driver_age_non_negative"),
        sa.CheckConstraint("yearly_premium >= 0", name="ck_car_brands_yearly_premium_non_negative"),
    )
    op.create_index("ix_car_brands_id", "car_brands", ["id"], unique=False)

    # Brands are fixed-price reference data
    op.bulk_insert(
        car_brands,
        [
            {"id": 1, "name": "Audi", "minimum_driver_age": 18, "yearly_premium": 250},
            {"id": 2, "name": "BMW", "minimum_driver_age": 18, "yearly_premium": 150},
            {"id": 3, "name": "Porsche", "minimum_driver_age": 25, "yearly_premium": 500},
        ],
    )

    # Explicit ids do not advance the PostgreSQL sequence
    if op.get_bind().dialect.name == "postgresql":
        op.execute(
            sa.text(
                "SELECT setval(pg_get_serial_sequence('car_brands', 'id'), "
                "(SELECT MAX(id) FROM car_brands))"
            )
        )


def downgrade() -> None:
    op.drop_index("ix_car_brands_id", table_name="car_brands")
    op.drop_table("car_brands")
