"""Factory functions for business logic services."""

from sqlalchemy.ext.asyncio import AsyncSession
from driverlog.config import get_settings
from driverlog.repositories.daily_report_repository import DailyReportRepository
from driverlog.services.daily_report_service import DailyReportService


def get_daily_report_service(db_session: AsyncSession) -> DailyReportService:
    """
    Create DailyReportService with dependencies.

    Note: Not cached because depends on request-scoped db session.

    Args:
        db_session: Database session

    Returns:
        DailyReportService instance
    """
    settings = get_settings()
    return DailyReportService(
        report_repository=DailyReportRepository(db_session),
        recent_reports_limit=settings.recent_reports_limit,
    )
