"""create live_classes

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "live_classes",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("course_id", sa.String(length=64), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("scheduled_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), nullable=False),
        sa.Column("meeting_link", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False, server_default="scheduled"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint(
            "status IN ('scheduled', 'ongoing', 'completed', 'cancelled')",
            name="ck_live_classes_status",
        ),
    )
    op.create_index("ix_live_classes_course_id", "live_classes", ["course_id"])
    op.create_index("ix_live_classes_scheduled_date", "live_classes", ["scheduled_date"])


def downgrade() -> None:
    op.drop_index("ix_live_classes_scheduled_date", table_name="live_classes")
    op.drop_index("ix_live_classes_course_id", table_name="live_classes")
    op.drop_table("live_classes")
