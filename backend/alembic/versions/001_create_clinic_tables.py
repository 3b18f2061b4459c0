"""Create clinic tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates `types`, `owners`, `pets` and `visits`, and seeds the pet types.
Rollback: downgrade() drops all four tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PET_TYPES = ("cat", "dog", "lizard", "snake", "bird", "hamster")


def upgrade() -> None:
    types_table = op.create_table(
        "types",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(80), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "owners",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(30), nullable=False),
        sa.Column("last_name", sa.String(30), nullable=False),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("city", sa.String(80), nullable=False),
        sa.Column("telephone", sa.String(20), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_owners_last_name", "owners", ["last_name"])

    op.create_table(
        "pets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(30), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=True),
        sa.Column("type_id", sa.Integer(), sa.ForeignKey("types.id"), nullable=True),
        sa.Column("owner_id", sa.Integer(), sa.ForeignKey("owners.id"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_pets_owner_id", "pets", ["owner_id"])

    op.create_table(
        "visits",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("pet_id", sa.Integer(), sa.ForeignKey("pets.id"), nullable=False),
        sa.Column("visit_date", sa.Date(), nullable=True),
        sa.Column("description", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_visits_pet_id", "visits", ["pet_id"])

    op.bulk_insert(types_table, [{"name": name} for name in PET_TYPES])


def downgrade() -> None:
    op.drop_index("idx_visits_pet_id", table_name="visits")
    op.drop_table("visits")
    op.drop_index("idx_pets_owner_id", table_name="pets")
    op.drop_table("pets")
    op.drop_index("idx_owners_last_name", table_name="owners")
    op.drop_table("owners")
    op.drop_table("types")
