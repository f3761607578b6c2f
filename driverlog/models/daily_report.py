"""Daily work report model."""

from __future__ import annotations

import datetime as dt
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    ForeignKey,
    Integer,
    String,
    Text,
    TIMESTAMP,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship
from driverlog.database import Base

if TYPE_CHECKING:
    from driverlog.models.user import UserProfile


class DailyReport(Base):
    """One driver's work record for a single calendar date."""

    __tablename__ = "daily_reports"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_daily_reports_user_date"),
        CheckConstraint(
            "start_odometer IS NULL OR start_odometer BETWEEN 0 AND 999999",
            name="ck_daily_reports_start_odometer_range",
        ),
        CheckConstraint(
            "end_odometer IS NULL OR end_odometer BETWEEN 0 AND 999999",
            name="ck_daily_reports_end_odometer_range",
        ),
        CheckConstraint(
            "deliveries IS NULL OR deliveries BETWEEN 0 AND 999",
            name="ck_daily_reports_deliveries_range",
        ),
        CheckConstraint(
            "highway_fee IS NULL OR highway_fee >= 0",
            name="ck_daily_reports_highway_fee_non_negative",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    date: Mapped[dt.date] = mapped_column(Date, index=True)
    is_worked: Mapped[bool] = mapped_column(Boolean, server_default="true")

    # Zero-padded "HH:MM"
    start_time: Mapped[str | None] = mapped_column(String(5))
    end_time: Mapped[str | None] = mapped_column(String(5))

    start_odometer: Mapped[int | None] = mapped_column(Integer)
    end_odometer: Mapped[int | None] = mapped_column(Integer)

    # Derived from the odometer pair on every write
    distance_km: Mapped[int | None] = mapped_column(Integer)

    deliveries: Mapped[int | None] = mapped_column(Integer)
    highway_fee: Mapped[int | None] = mapped_column(Integer)
    notes: Mapped[str | None] = mapped_column(Text)

    created_at: Mapped[dt.datetime] = mapped_column(
        TIMESTAMP(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    user: Mapped[UserProfile] = relationship("UserProfile", back_populates="daily_reports")

    def __repr__(self):
        return (
            f"<DailyReport(user_id='{self.user_id}', date='{self.date}', "
            f"is_worked={self.is_worked})>"
        )
