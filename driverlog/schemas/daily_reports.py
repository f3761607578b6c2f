"""Schemas for daily report operations."""

import datetime as dt
from typing import Optional
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# 24-hour clock, hour may be given without a leading zero
TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"

ODOMETER_MIN = 0
ODOMETER_MAX = 999999
DELIVERIES_MAX = 999
NOTES_MAX_LENGTH = 500


def normalize_time(value: Optional[str]) -> Optional[str]:
    """Zero-pad an already pattern-checked time so lexical order is temporal order."""
    if value is None:
        return None
    hours, minutes = value.split(":")
    return f"{int(hours):02d}:{minutes}"


class DailyReportPayload(BaseModel):
    """Driver-submitted daily report, field rules only.

    Cross-field rules live in ``driverlog.validation``.
    """

    date: dt.date = Field(..., description="Report date (YYYY-MM-DD)")
    is_worked: bool = Field(..., strict=True, description="Whether the driver worked on this date")
    start_time: Optional[str] = Field(None, pattern=TIME_PATTERN, description="Shift start (HH:MM)")
    end_time: Optional[str] = Field(None, pattern=TIME_PATTERN, description="Shift end (HH:MM)")
    start_odometer: Optional[int] = Field(
        None, strict=True, ge=ODOMETER_MIN, le=ODOMETER_MAX, description="Odometer at shift start"
    )
    end_odometer: Optional[int] = Field(
        None, strict=True, ge=ODOMETER_MIN, le=ODOMETER_MAX, description="Odometer at shift end"
    )
    deliveries: Optional[int] = Field(
        None, strict=True, ge=0, le=DELIVERIES_MAX, description="Delivery count"
    )
    highway_fee: Optional[int] = Field(
        None,
        strict=True,
        ge=0,
        validation_alias=AliasChoices("highway_fee", "toll_fee"),
        description="Highway / toll fee",
    )
    notes: Optional[str] = Field(None, max_length=NOTES_MAX_LENGTH, description="Free-text notes")

    @field_validator("date", mode="before")
    @classmethod
    def _require_date(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("Date is required")
        return value

    @field_validator("start_time", "end_time")
    @classmethod
    def _pad_time(cls, value: Optional[str]) -> Optional[str]:
        return normalize_time(value)


class DailyReportResponse(BaseModel):
    """Response for a single daily report."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(..., description="Report ID")
    user_id: UUID = Field(..., description="Owner ID")
    date: dt.date = Field(..., description="Report date")
    is_worked: bool
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    start_odometer: Optional[int] = None
    end_odometer: Optional[int] = None
    distance_km: Optional[int] = Field(None, description="Derived from the odometer pair")
    deliveries: Optional[int] = None
    highway_fee: Optional[int] = None
    notes: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None


class DailyReportListResponse(BaseModel):
    """Response for listing daily reports, newest date first."""

    reports: list[DailyReportResponse]
    limit: int = Field(..., description="Page size")
    offset: int = Field(..., description="Page offset")


class MetricsPreviewRequest(BaseModel):
    """Raw readings to preview derived metrics for, before submitting."""

    start_odometer: Optional[int] = Field(None, strict=True, ge=ODOMETER_MIN, le=ODOMETER_MAX)
    end_odometer: Optional[int] = Field(None, strict=True, ge=ODOMETER_MIN, le=ODOMETER_MAX)
    start_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(None, pattern=TIME_PATTERN)


class MetricsPreviewResponse(BaseModel):
    """Derived metrics preview."""

    distance_km: int
    working_hours: float


class LastOdometerResponse(BaseModel):
    """Most recent end odometer reading, if any."""

    last_odometer: Optional[int] = None
