"""Daily reports router."""

from datetime import date
from typing import Annotated, Any, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, Response, status

from driverlog.config import Settings, get_settings
from driverlog.dependencies import CurrentSession, DailyReportServiceDep
from driverlog.schemas.daily_reports import (
    DailyReportListResponse,
    DailyReportResponse,
    LastOdometerResponse,
    MetricsPreviewRequest,
    MetricsPreviewResponse,
)
from driverlog.services.daily_report_service import preview_metrics
from driverlog.utils.logger import get_logger
from driverlog.validation import ensure_valid_report

log = get_logger(__name__)

router = APIRouter(prefix="/daily-reports", tags=["Daily Reports"])


@router.post("/", response_model=DailyReportResponse)
async def upsert_daily_report(
    payload: Annotated[dict[str, Any], Body(description="Daily report fields")],
    response: Response,
    session: CurrentSession,
    service: DailyReportServiceDep,
) -> DailyReportResponse:
    """
    Save the driver's report for ``payload.date``.

    Creates the report (201) or replaces the fields of the existing one for
    the same date (200). Field and cross-field rule violations are reported
    together as one 422.
    """
    report_payload = ensure_valid_report(payload)
    report, created = await service.upsert_daily_report(report_payload, session.user_id)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return DailyReportResponse.model_validate(report)


@router.get("/", response_model=DailyReportListResponse)
async def list_daily_reports(
    session: CurrentSession,
    service: DailyReportServiceDep,
    settings: Annotated[Settings, Depends(get_settings)],
    start_date: Optional[date] = Query(None, description="Earliest date (inclusive)"),
    end_date: Optional[date] = Query(None, description="Latest date (inclusive)"),
    is_worked: Optional[bool] = Query(None, description="Only worked / non-worked days"),
    limit: Optional[int] = Query(None, ge=1, le=100, description="Page size"),
    offset: int = Query(0, ge=0),
) -> DailyReportListResponse:
    """List the driver's reports, newest date first."""
    if limit is None:
        limit = settings.default_page_size
    reports = await service.list_reports(
        session.user_id,
        start_date=start_date,
        end_date=end_date,
        is_worked=is_worked,
        limit=limit,
        offset=offset,
    )
    return DailyReportListResponse(
        reports=[DailyReportResponse.model_validate(r) for r in reports],
        limit=limit,
        offset=offset,
    )


@router.post("/preview", response_model=MetricsPreviewResponse)
async def preview_daily_report_metrics(
    request: MetricsPreviewRequest,
    session: CurrentSession,
) -> MetricsPreviewResponse:
    """Distance and working hours for raw readings, nothing is saved."""
    return preview_metrics(request)


@router.get("/last-odometer", response_model=LastOdometerResponse)
async def get_last_odometer(
    session: CurrentSession,
    service: DailyReportServiceDep,
) -> LastOdometerResponse:
    """End odometer of the most recent report that has one."""
    last = await service.get_last_odometer_reading(session.user_id)
    return LastOdometerResponse(last_odometer=last)


@router.get("/by-date/{report_date}", response_model=DailyReportResponse)
async def get_daily_report_by_date(
    report_date: date,
    session: CurrentSession,
    service: DailyReportServiceDep,
) -> DailyReportResponse:
    """Get the driver's report for a date."""
    report = await service.get_report_by_date(session.user_id, report_date)
    return DailyReportResponse.model_validate(report)


@router.delete("/{report_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_daily_report(
    report_id: UUID,
    session: CurrentSession,
    service: DailyReportServiceDep,
) -> Response:
    """Delete one of the driver's reports."""
    await service.delete_report(report_id, session.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
