"""User profile model mirrored from the auth provider."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import String, TIMESTAMP, func
from sqlalchemy.dialects.postgresql import UUID, JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship
from driverlog.database import Base

if TYPE_CHECKING:
    from driverlog.models.daily_report import DailyReport


class UserProfile(Base):
    """Driver profile keyed by the auth provider's user id."""

    __tablename__ = "users"

    # Same value as the token subject; not generated locally
    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)

    email: Mapped[str | None] = mapped_column(String(255), index=True)
    display_name: Mapped[str | None] = mapped_column(String(255))
    company_name: Mapped[str | None] = mapped_column(String(255))

    # {"model": str, "plate": str, "year": int}
    vehicle_info: Mapped[dict | None] = mapped_column(JSONB)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    daily_reports: Mapped[list[DailyReport]] = relationship(
        "DailyReport", back_populates="user", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<UserProfile(id='{self.id}', email='{self.email}')>"
