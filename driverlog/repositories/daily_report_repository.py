"""Repository for DailyReport model operations."""

from contextlib import contextmanager
from datetime import date, datetime, timezone
from typing import Any, Iterator, Mapping, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from driverlog.exceptions import (
    DailyReportConflictError,
    DailyReportNotFoundError,
    RepositoryError,
)
from driverlog.models.daily_report import DailyReport
from driverlog.repositories.base import (
    BaseDailyReportRepository,
    refresh_distance,
    writable_values,
)
from driverlog.utils.logger import get_logger

log = get_logger(__name__)

UNIQUE_USER_DATE = "uq_daily_reports_user_date"


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    """Turn unexpected SQLAlchemy failures into RepositoryError."""
    try:
        yield
    except SQLAlchemyError as e:
        log.error("daily report storage failure", action=action, error=str(e))
        raise RepositoryError(f"Failed to {action}: {e}") from e


class DailyReportRepository(BaseDailyReportRepository):
    """Repository for DailyReport CRUD operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_owned(self, report_id: UUID, user_id: UUID) -> Optional[DailyReport]:
        result = await self.session.execute(
            select(DailyReport).where(
                DailyReport.id == report_id,
                DailyReport.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def create(self, user_id: UUID, data: Mapping[str, Any]) -> DailyReport:
        """Insert a new report inside a savepoint."""
        report = DailyReport(user_id=user_id, **writable_values(data))
        refresh_distance(report)

        with _storage_errors("create daily report"):
            try:
                async with self.session.begin_nested():
                    self.session.add(report)
                    await self.session.flush()
            except IntegrityError as e:
                if UNIQUE_USER_DATE not in str(e.orig):
                    raise
                log.warning(
                    "daily report conflict", user_id=str(user_id), date=str(report.date)
                )
                raise DailyReportConflictError(str(report.date)) from None

            await self.session.refresh(report)

        log.info("daily report created", user_id=str(user_id), date=str(report.date))
        return report

    async def get_by_date(self, user_id: UUID, report_date: date) -> Optional[DailyReport]:
        """Get the user's report for a date."""
        log.debug("query daily report by date", user_id=str(user_id), date=str(report_date))
        with _storage_errors("fetch daily report"):
            result = await self.session.execute(
                select(DailyReport).where(
                    DailyReport.user_id == user_id,
                    DailyReport.date == report_date,
                )
            )
            report = result.scalar_one_or_none()
        log.debug("query result", found=report is not None)
        return report

    async def update(
        self, report_id: UUID, user_id: UUID, data: Mapping[str, Any]
    ) -> DailyReport:
        """
        Apply field values to an existing report.

        The derived distance is recomputed from the resulting odometer pair.
        Caller is responsible for committing the transaction.
        """
        with _storage_errors("update daily report"):
            report = await self._get_owned(report_id, user_id)
            if report is None:
                raise DailyReportNotFoundError(str(report_id))

            for key, value in writable_values(data).items():
                setattr(report, key, value)
            refresh_distance(report)
            report.updated_at = datetime.now(timezone.utc)

            await self.session.flush()
            await self.session.refresh(report)

        log.info("daily report updated", report_id=str(report_id), user_id=str(user_id))
        return report

    async def delete(self, report_id: UUID, user_id: UUID) -> None:
        """
        Delete a report.

        Caller is responsible for committing the transaction.
        """
        with _storage_errors("delete daily report"):
            report = await self._get_owned(report_id, user_id)
            if report is None:
                raise DailyReportNotFoundError(str(report_id))

            await self.session.delete(report)
            await self.session.flush()

        log.info("daily report deleted", report_id=str(report_id), user_id=str(user_id))

    async def list_reports(
        self,
        user_id: UUID,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        is_worked: Optional[bool] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[DailyReport]:
        """List reports newest date first, optionally filtered and paged."""
        stmt = (
            select(DailyReport)
            .where(DailyReport.user_id == user_id)
            .order_by(DailyReport.date.desc())
        )
        if start_date is not None:
            stmt = stmt.where(DailyReport.date >= start_date)
        if end_date is not None:
            stmt = stmt.where(DailyReport.date <= end_date)
        if is_worked is not None:
            stmt = stmt.where(DailyReport.is_worked == is_worked)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        with _storage_errors("list daily reports"):
            result = await self.session.execute(stmt)
            reports = list(result.scalars().all())

        log.debug("query daily reports", user_id=str(user_id), count=len(reports))
        return reports

    async def get_last_odometer_reading(self, user_id: UUID) -> Optional[int]:
        """End odometer of the most recent report (by date) that has one."""
        with _storage_errors("fetch last odometer reading"):
            result = await self.session.execute(
                select(DailyReport.end_odometer)
                .where(
                    DailyReport.user_id == user_id,
                    DailyReport.end_odometer.isnot(None),
                )
                .order_by(DailyReport.date.desc())
                .limit(1)
            )
            return result.scalar_one_or_none()
