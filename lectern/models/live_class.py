from datetime import datetime
from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from lectern.models.base import Base

LIVE_CLASS_STATUSES = ("scheduled", "ongoing", "completed", "cancelled")


class LiveClass(Base):
    """Live class record owned by the course service; read-only here."""

    __tablename__ = "live_classes"
    __table_args__ = (
        Index("ix_live_classes_course_id", "course_id"),
        Index("ix_live_classes_scheduled_date", "scheduled_date"),
        CheckConstraint(
            "status IN (" + ", ".join(f"'{s}'" for s in LIVE_CLASS_STATUSES) + ")",
            name="ck_live_classes_status",
        ),
    )

    # ids come from the course service and are opaque strings
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    course_id: Mapped[str] = mapped_column(String(64), nullable=False)

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    scheduled_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    meeting_link: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="scheduled")

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
