"""Abstract persistence boundary for daily reports."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Mapping, Optional
from uuid import UUID

from driverlog.models.daily_report import DailyReport
from driverlog.utils.metrics import compute_distance

# Columns a caller may set; id, user_id, distance_km and timestamps are not among them
WRITABLE_FIELDS = (
    "date",
    "is_worked",
    "start_time",
    "end_time",
    "start_odometer",
    "end_odometer",
    "deliveries",
    "highway_fee",
    "notes",
)


def writable_values(data: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only caller-settable fields."""
    return {key: value for key, value in data.items() if key in WRITABLE_FIELDS}


def refresh_distance(report: DailyReport) -> None:
    """Recompute the derived distance from the report's odometer pair."""
    if report.start_odometer is None or report.end_odometer is None:
        report.distance_km = None
    else:
        report.distance_km = compute_distance(report.start_odometer, report.end_odometer)


class BaseDailyReportRepository(ABC):
    """Operations the report workflows need from storage.

    Every operation is scoped to ``user_id``; rows owned by other users
    behave as if they did not exist.
    """

    @abstractmethod
    async def create(self, user_id: UUID, data: Mapping[str, Any]) -> DailyReport:
        """
        Persist a new report.

        Raises:
            DailyReportConflictError: A report already exists for (user, date)
            RepositoryError: Any other storage failure
        """
        pass

    @abstractmethod
    async def get_by_date(self, user_id: UUID, report_date: date) -> Optional[DailyReport]:
        """Return the user's report for a date, or None."""
        pass

    @abstractmethod
    async def update(
        self, report_id: UUID, user_id: UUID, data: Mapping[str, Any]
    ) -> DailyReport:
        """
        Apply field values to an existing report.

        Raises:
            DailyReportNotFoundError: No such report for this user
            RepositoryError: Any other storage failure
        """
        pass

    @abstractmethod
    async def delete(self, report_id: UUID, user_id: UUID) -> None:
        """
        Delete a report.

        Raises:
            DailyReportNotFoundError: No such report for this user
            RepositoryError: Any other storage failure
        """
        pass

    @abstractmethod
    async def list_reports(
        self,
        user_id: UUID,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        is_worked: Optional[bool] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[DailyReport]:
        """List reports newest date first; date bounds are inclusive."""
        pass

    @abstractmethod
    async def get_last_odometer_reading(self, user_id: UUID) -> Optional[int]:
        """End odometer of the most recent report that has one."""
        pass
