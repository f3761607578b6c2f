"""Repository layer for data access."""

from driverlog.repositories.base import BaseDailyReportRepository
from driverlog.repositories.daily_report_repository import DailyReportRepository
from driverlog.repositories.user_repository import UserRepository

__all__ = [
    "BaseDailyReportRepository",
    "DailyReportRepository",
    "UserRepository",
]
