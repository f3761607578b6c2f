"""Shared pytest fixtures."""

# Clear settings cache before any imports to prevent stale values with coverage
from driverlog.config import get_settings

get_settings.cache_clear()

import pytest
import uuid
from contextlib import asynccontextmanager
from datetime import date, datetime, timezone
from typing import Any, Mapping, Optional
from unittest.mock import AsyncMock, Mock
from uuid import UUID

import driverlog.models  # noqa: F401
from driverlog.exceptions import DailyReportConflictError, DailyReportNotFoundError
from driverlog.models.daily_report import DailyReport
from driverlog.repositories.base import (
    BaseDailyReportRepository,
    refresh_distance,
    writable_values,
)


class InMemoryDailyReportRepository(BaseDailyReportRepository):
    """Dict-backed repository with the same contract as the SQL one."""

    def __init__(self):
        self.rows: dict[UUID, DailyReport] = {}

    def _owned(self, report_id: UUID, user_id: UUID) -> Optional[DailyReport]:
        report = self.rows.get(report_id)
        if report is None or report.user_id != user_id:
            return None
        return report

    async def create(self, user_id: UUID, data: Mapping[str, Any]) -> DailyReport:
        values = writable_values(data)
        if any(r.user_id == user_id and r.date == values["date"] for r in self.rows.values()):
            raise DailyReportConflictError(str(values["date"]))
        now = datetime.now(timezone.utc)
        report = DailyReport(
            id=uuid.uuid4(), user_id=user_id, created_at=now, updated_at=now, **values
        )
        refresh_distance(report)
        self.rows[report.id] = report
        return report

    async def get_by_date(self, user_id: UUID, report_date: date) -> Optional[DailyReport]:
        for report in self.rows.values():
            if report.user_id == user_id and report.date == report_date:
                return report
        return None

    async def update(
        self, report_id: UUID, user_id: UUID, data: Mapping[str, Any]
    ) -> DailyReport:
        report = self._owned(report_id, user_id)
        if report is None:
            raise DailyReportNotFoundError(str(report_id))
        for key, value in writable_values(data).items():
            setattr(report, key, value)
        refresh_distance(report)
        report.updated_at = datetime.now(timezone.utc)
        return report

    async def delete(self, report_id: UUID, user_id: UUID) -> None:
        if self._owned(report_id, user_id) is None:
            raise DailyReportNotFoundError(str(report_id))
        del self.rows[report_id]

    async def list_reports(
        self,
        user_id: UUID,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        is_worked: Optional[bool] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[DailyReport]:
        reports = [
            r
            for r in self.rows.values()
            if r.user_id == user_id
            and (start_date is None or r.date >= start_date)
            and (end_date is None or r.date <= end_date)
            and (is_worked is None or r.is_worked == is_worked)
        ]
        reports.sort(key=lambda r: r.date, reverse=True)
        reports = reports[offset:]
        return reports if limit is None else reports[:limit]

    async def get_last_odometer_reading(self, user_id: UUID) -> Optional[int]:
        for report in await self.list_reports(user_id):
            if report.end_odometer is not None:
                return report.end_odometer
        return None


@pytest.fixture
def report_store():
    """Empty in-memory daily report repository."""
    return InMemoryDailyReportRepository()


@pytest.fixture
def user_id():
    """Owner id for the reports under test."""
    return uuid.uuid4()


@pytest.fixture
def worked_payload():
    """Factory for a valid worked-day payload dict."""

    def _make(**overrides):
        payload = {
            "date": "2024-03-15",
            "is_worked": True,
            "start_time": "09:00",
            "end_time": "17:30",
            "start_odometer": 12000,
            "end_odometer": 12085,
            "deliveries": 120,
            "highway_fee": 1500,
            "notes": "Route B",
        }
        payload.update(overrides)
        return payload

    return _make


# Database mocking fixtures


@pytest.fixture
def mock_async_session():
    """Create a mock AsyncSession for repository tests."""
    session = AsyncMock()

    mock_result = Mock()
    mock_result.scalar_one_or_none = Mock(return_value=None)
    mock_result.scalar_one = Mock(return_value=0)
    mock_result.scalars = Mock(return_value=Mock(all=Mock(return_value=[])))
    mock_result.fetchall = Mock(return_value=[])
    mock_result.rowcount = 0

    session.execute = AsyncMock(return_value=mock_result)
    session.scalar = AsyncMock(return_value=0)
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.add = Mock()
    session.add_all = Mock()
    session.delete = AsyncMock()
    session.expire_all = Mock()

    # Mock begin_nested for savepoint tests
    @asynccontextmanager
    async def begin_nested():
        yield

    session.begin_nested = begin_nested

    return session
