"""Schemas for dashboard statistics."""

from pydantic import BaseModel, Field

from driverlog.schemas.daily_reports import DailyReportResponse


class MonthlyStats(BaseModel):
    """Totals over the worked days of one month."""

    year: int
    month: int = Field(..., ge=1, le=12)
    working_days: int = 0
    total_distance: int = 0
    total_deliveries: int = 0
    total_highway_fee: int = 0
    # Month-wide hour aggregation is not implemented; always 0
    total_hours: float = 0.0


class DashboardResponse(BaseModel):
    """Dashboard view: month summary plus latest activity."""

    monthly_stats: MonthlyStats
    recent_reports: list[DailyReportResponse]
    last_odometer: int | None = None
