"""Daily report workflows: upsert, lookups and monthly aggregation."""

import calendar
from datetime import date
from typing import Iterable, Optional
from uuid import UUID

from driverlog.exceptions import ResourceNotFoundError
from driverlog.models.daily_report import DailyReport
from driverlog.repositories.base import BaseDailyReportRepository
from driverlog.schemas.daily_reports import (
    DailyReportPayload,
    DailyReportResponse,
    MetricsPreviewRequest,
    MetricsPreviewResponse,
)
from driverlog.schemas.dashboard import DashboardResponse, MonthlyStats
from driverlog.utils.logger import get_logger
from driverlog.utils.metrics import compute_distance, compute_working_hours

log = get_logger(__name__)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a month, both inclusive."""
    _, last_day = calendar.monthrange(year, month)
    return date(year, month, 1), date(year, month, last_day)


def summarize_month(reports: Iterable[DailyReport], year: int, month: int) -> MonthlyStats:
    """Reduce a month's reports to totals over the worked days.

    Missing numeric values count as zero. Hours are not aggregated.
    """
    worked = [r for r in reports if r.is_worked]
    return MonthlyStats(
        year=year,
        month=month,
        working_days=len(worked),
        total_distance=sum(r.distance_km or 0 for r in worked),
        total_deliveries=sum(r.deliveries or 0 for r in worked),
        total_highway_fee=sum(r.highway_fee or 0 for r in worked),
        total_hours=0.0,
    )


def preview_metrics(request: MetricsPreviewRequest) -> MetricsPreviewResponse:
    """Derived metrics for raw readings, without persisting anything."""
    return MetricsPreviewResponse(
        distance_km=compute_distance(request.start_odometer, request.end_odometer),
        working_hours=compute_working_hours(request.start_time, request.end_time),
    )


class DailyReportService:
    """Orchestrates validation output and the report repository."""

    def __init__(
        self,
        report_repository: BaseDailyReportRepository,
        recent_reports_limit: int = 3,
    ):
        self.report_repository = report_repository
        self.recent_reports_limit = recent_reports_limit

    async def upsert_daily_report(
        self, payload: DailyReportPayload, user_id: UUID
    ) -> tuple[DailyReport, bool]:
        """
        Create the user's report for ``payload.date`` or update the existing one.

        The lookup and the write are separate calls. Two concurrent first
        submissions for the same date can both take the create branch; the
        (user_id, date) unique constraint makes the loser fail with
        DailyReportConflictError.

        Args:
            payload: Report that passed field and cross-field rules
            user_id: Owner of the report

        Returns:
            Tuple of (report, created)
        """
        values = payload.model_dump()
        existing = await self.report_repository.get_by_date(user_id, payload.date)

        if existing is not None:
            report = await self.report_repository.update(existing.id, user_id, values)
            log.info("daily report upserted", action="update", date=str(payload.date))
            return report, False

        report = await self.report_repository.create(user_id, values)
        log.info("daily report upserted", action="create", date=str(payload.date))
        return report, True

    async def get_report_by_date(self, user_id: UUID, report_date: date) -> DailyReport:
        """Direct lookup; a missing report is an error here."""
        report = await self.report_repository.get_by_date(user_id, report_date)
        if report is None:
            raise ResourceNotFoundError("Daily report", report_date.isoformat())
        return report

    async def list_reports(
        self,
        user_id: UUID,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        is_worked: Optional[bool] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[DailyReport]:
        return await self.report_repository.list_reports(
            user_id,
            start_date=start_date,
            end_date=end_date,
            is_worked=is_worked,
            limit=limit,
            offset=offset,
        )

    async def delete_report(self, report_id: UUID, user_id: UUID) -> None:
        await self.report_repository.delete(report_id, user_id)

    async def get_last_odometer_reading(self, user_id: UUID) -> Optional[int]:
        return await self.report_repository.get_last_odometer_reading(user_id)

    async def get_monthly_stats(self, user_id: UUID, year: int, month: int) -> MonthlyStats:
        """Totals over the user's worked days in the given month."""
        start, end = month_bounds(year, month)
        reports = await self.report_repository.list_reports(
            user_id, start_date=start, end_date=end
        )
        stats = summarize_month(reports, year, month)
        log.debug(
            "monthly stats computed",
            user_id=str(user_id),
            year=year,
            month=month,
            working_days=stats.working_days,
        )
        return stats

    async def get_dashboard(self, user_id: UUID, year: int, month: int) -> DashboardResponse:
        """Month summary, the latest reports and the odometer to start from next."""
        stats = await self.get_monthly_stats(user_id, year, month)
        recent = await self.report_repository.list_reports(
            user_id, limit=self.recent_reports_limit
        )
        last_odometer = await self.report_repository.get_last_odometer_reading(user_id)

        return DashboardResponse(
            monthly_stats=stats,
            recent_reports=[DailyReportResponse.model_validate(r) for r in recent],
            last_odometer=last_odometer,
        )
