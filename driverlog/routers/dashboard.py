"""Dashboard router: monthly statistics and recent activity."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from driverlog.dependencies import CurrentSession, DailyReportServiceDep
from driverlog.schemas.dashboard import DashboardResponse, MonthlyStats

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/", response_model=DashboardResponse)
async def get_dashboard(
    session: CurrentSession,
    service: DailyReportServiceDep,
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
) -> DashboardResponse:
    """Month summary (current month by default), latest reports and last odometer."""
    today = date.today()
    return await service.get_dashboard(
        session.user_id,
        year if year is not None else today.year,
        month if month is not None else today.month,
    )


@router.get("/monthly-stats", response_model=MonthlyStats)
async def get_monthly_stats(
    session: CurrentSession,
    service: DailyReportServiceDep,
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
) -> MonthlyStats:
    """Totals over the driver's worked days in one month."""
    return await service.get_monthly_stats(session.user_id, year, month)
