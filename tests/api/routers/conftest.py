"""Shared pytest fixtures for router integration tests."""

import pytest
import uuid
from contextlib import ExitStack, asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock, Mock, patch

from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from driverlog.models.user import UserProfile
from driverlog.services.daily_report_service import DailyReportService
from driverlog.services.driver_session import DriverSession


# Mock database before the app starts to avoid connection issues
@pytest.fixture(autouse=True)
def mock_database_init():
    """Mock database initialization for all router tests."""
    with ExitStack() as stack:
        stack.enter_context(patch("driverlog.main.init_db", new_callable=AsyncMock))
        mock_engine = stack.enter_context(patch("driverlog.main.engine"))
        mock_engine.dispose = AsyncMock()
        yield


@pytest.fixture
def mock_db_session():
    """Create a mock AsyncSession for router tests."""
    session = AsyncMock(spec=AsyncSession)

    mock_result = Mock()
    mock_result.scalar_one_or_none = Mock(return_value=None)
    mock_result.scalar_one = Mock(return_value=1)

    session.execute = AsyncMock(return_value=mock_result)
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.add = Mock()
    session.delete = AsyncMock()
    session.close = AsyncMock()

    @asynccontextmanager
    async def begin_nested():
        yield

    session.begin_nested = begin_nested

    return session


@pytest.fixture
def mock_profile(user_id):
    """Driver profile attached to the authenticated session."""
    return UserProfile(
        id=user_id,
        email="driver@example.com",
        display_name="Test Driver",
        company_name="Acme Logistics",
        vehicle_info={"model": "Hiace", "plate": "Shinagawa 400 A 1234", "year": 2020},
        created_at=datetime(2024, 1, 5, tzinfo=timezone.utc),
    )


@pytest.fixture
def report_service(report_store):
    """DailyReportService backed by the in-memory repository."""
    return DailyReportService(report_store)


def _create_test_client(mock_db_session, report_service, *, session=None):
    """Build a TestClient with infra dependencies overridden.

    When session is provided, token verification is bypassed (fully
    authenticated client). When omitted, the session dependency runs normally
    so tests can assert 401 behaviour.
    """
    from driverlog.main import app
    from driverlog.database import get_db
    from driverlog.dependencies import get_current_session, get_daily_report_service_dep

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield mock_db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_daily_report_service_dep] = lambda: report_service

    if session is not None:
        app.dependency_overrides[get_current_session] = lambda: session

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def driver_session(user_id, mock_profile):
    return DriverSession(user_id=user_id, profile=mock_profile)


@pytest.fixture
def client(mock_db_session, report_service, driver_session):
    """Create TestClient with all dependencies overridden including auth."""
    yield from _create_test_client(mock_db_session, report_service, session=driver_session)


@pytest.fixture
def unauthenticated_client(mock_db_session, report_service):
    """Create TestClient WITHOUT auth override to test 401 responses."""
    yield from _create_test_client(mock_db_session, report_service)


@pytest.fixture
def other_user_id():
    return uuid.uuid4()
