"""initial_schema

Revision ID: 3c9e1f7a2b40
Revises:
Create Date: 2026-10-19 00:00:00.000000

Creates the users, crops, diseases and feedback tables.  References between
them are ON DELETE SET NULL: removing a crop or disease never removes the
rows that point at it.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3c9e1f7a2b40"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
        nullable=False,
    )


def upgrade() -> None:
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # users
    op.create_table(
        "users",
        _id_column(),
        sa.Column("phone_number", sa.String(15), nullable=False),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column(
            "is_admin",
            sa.Boolean(),
            server_default=sa.text("false"),
            nullable=False,
        ),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_phone_number", "users", ["phone_number"], unique=True)

    # crops
    op.create_table(
        "crops",
        _id_column(),
        sa.Column("name_hindi", sa.Text(), nullable=False),
        sa.Column("name_english", sa.Text(), nullable=False),
        sa.Column("scientific_name", sa.Text(), nullable=True),
        sa.Column("category", sa.Text(), nullable=True),
        sa.Column("sowing_time", sa.Text(), nullable=True),
        sa.Column("temperature", sa.Text(), nullable=True),
        sa.Column("water_requirement", sa.Text(), nullable=True),
        sa.Column("care_instructions", postgresql.JSONB(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_crops_name_hindi", "crops", ["name_hindi"])

    # diseases
    op.create_table(
        "diseases",
        _id_column(),
        sa.Column("crop_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("name_hindi", sa.Text(), nullable=False),
        sa.Column("name_english", sa.Text(), nullable=False),
        sa.Column("scientific_name", sa.Text(), nullable=True),
        sa.Column("severity", sa.Text(), nullable=True),
        sa.Column("type", sa.Text(), nullable=True),
        sa.Column("symptoms", postgresql.JSONB(), nullable=True),
        sa.Column("causes", postgresql.JSONB(), nullable=True),
        sa.Column("treatment", postgresql.JSONB(), nullable=True),
        sa.Column("prevention", postgresql.JSONB(), nullable=True),
        sa.Column("images", postgresql.JSONB(), nullable=True),
        _created_at_column(),
        sa.ForeignKeyConstraint(["crop_id"], ["crops.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_diseases_crop_id", "diseases", ["crop_id"])
    op.create_index("ix_diseases_name_hindi", "diseases", ["name_hindi"])

    # feedback
    op.create_table(
        "feedback",
        _id_column(),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("crop_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("disease_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("phone_number", sa.String(15), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=True),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("type", sa.String(20), nullable=True),
        _created_at_column(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["crop_id"], ["crops.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["disease_id"], ["diseases.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_feedback_crop_id", "feedback", ["crop_id"])
    op.create_index("ix_feedback_disease_id", "feedback", ["disease_id"])
    op.create_index("ix_feedback_created_at", "feedback", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_feedback_created_at", table_name="feedback")
    op.drop_index("ix_feedback_disease_id", table_name="feedback")
    op.drop_index("ix_feedback_crop_id", table_name="feedback")
    op.drop_table("feedback")
    op.drop_index("ix_diseases_name_hindi", table_name="diseases")
    op.drop_index("ix_diseases_crop_id", table_name="diseases")
    op.drop_table("diseases")
    op.drop_index("ix_crops_name_hindi", table_name="crops")
    op.drop_table("crops")
    op.drop_index("ix_users_phone_number", table_name="users")
    op.drop_table("users")
