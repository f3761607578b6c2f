"""Database models."""

from driverlog.models.user import UserProfile
from driverlog.models.daily_report import DailyReport

__all__ = [
    "UserProfile",
    "DailyReport",
]
