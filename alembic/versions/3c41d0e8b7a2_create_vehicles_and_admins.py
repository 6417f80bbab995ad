"""Create vehicles and admins tables

Revision ID: 3c41d0e8b7a2
Revises:
Create Date: 2026-10-19 10:12:04.318220

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41d0e8b7a2"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "vehicles",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("slug", sa.String(length=140), nullable=False),
        sa.Column("brand_slug", sa.String(length=20), nullable=False),
        sa.Column("category_slug", sa.String(length=20), nullable=False),
        sa.Column("channel_slug", sa.String(length=20), nullable=False),
        sa.Column("ex_showroom", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("engine", postgresql.JSONB(none_as_null=True), nullable=True),
        sa.Column("performance", postgresql.JSONB(none_as_null=True), nullable=True),
        sa.Column("electric", postgresql.JSONB(none_as_null=True), nullable=True),
        sa.Column("thumbnail", sa.Text(), nullable=False),
        sa.Column("gallery", postgresql.JSONB(), nullable=False),
        sa.Column("highlights", postgresql.JSONB(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.UniqueConstraint("slug", name="uq_vehicles_slug"),
        sa.CheckConstraint(
            "(category_slug = 'ev' AND engine IS NULL AND performance IS NULL)"
            " OR (category_slug <> 'ev' AND electric IS NULL)",
            name="ck_vehicles_category_spec_groups",
        ),
    )
    op.create_index("ix_vehicles_category_slug", "vehicles", ["category_slug"])
    op.create_index("ix_vehicles_channel_slug", "vehicles", ["channel_slug"])

    op.create_table(
        "admins",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("admins")
    op.drop_index("ix_vehicles_channel_slug", table_name="vehicles")
    op.drop_index("ix_vehicles_category_slug", table_name="vehicles")
    op.drop_table("vehicles")
