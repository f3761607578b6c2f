"""FastAPI dependency injection providers."""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from driverlog.database import get_db
from driverlog.factories.service_factories import get_daily_report_service
from driverlog.services.auth_service import AuthService, get_auth_service
from driverlog.services.daily_report_service import DailyReportService
from driverlog.services.driver_session import DriverSession, open_driver_session

# Type aliases for cleaner router signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]


# ============================================================================
# Services (request-scoped)
# ============================================================================


def get_daily_report_service_dep(db: DbSession) -> DailyReportService:
    """Get DailyReportService with database session."""
    return get_daily_report_service(db)


DailyReportServiceDep = Annotated[DailyReportService, Depends(get_daily_report_service_dep)]


# ============================================================================
# Authentication Dependencies
# ============================================================================

AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def get_current_session(
    db: DbSession,
    auth_service: AuthServiceDep,
    authorization: Annotated[str | None, Header(alias="Authorization")] = None,
) -> AsyncGenerator[DriverSession, None]:
    """Open a driver session for the request and close it afterwards."""
    session = await open_driver_session(authorization, db, auth_service)
    try:
        yield session
    finally:
        session.close()


CurrentSession = Annotated[DriverSession, Depends(get_current_session)]
