"""Application exception hierarchy.

Every exception maps to an HTTP status code and a stable error code; the
handlers in ``driverlog.middleware.error_handler`` render them into the
shared error envelope.
"""

from typing import Any, Optional

from fastapi import status


class BaseAPIException(Exception):
    """Base class for all API-facing exceptions."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details
        if error_code is not None:
            self.error_code = error_code
        if status_code is not None:
            self.status_code = status_code


# ============================================================================
# Validation
# ============================================================================


class ReportValidationError(BaseAPIException):
    """A daily report payload violated one or more field rules."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "REPORT_VALIDATION_ERROR"

    def __init__(self, field_errors: dict[str, list[str]]):
        self.field_errors = field_errors
        super().__init__(
            "Daily report validation failed",
            details={"fields": field_errors},
        )


# ============================================================================
# Resources
# ============================================================================


class ResourceNotFoundError(BaseAPIException):
    """Requested resource does not exist (or is not owned by the caller)."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "RESOURCE_NOT_FOUND"

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class DailyReportNotFoundError(ResourceNotFoundError):
    """No daily report with the given id belongs to the user."""

    error_code = "DAILY_REPORT_NOT_FOUND"

    def __init__(self, report_id: str):
        super().__init__("Daily report", report_id)


class DailyReportConflictError(BaseAPIException):
    """A report for the same user and date already exists."""

    status_code = status.HTTP_409_CONFLICT
    error_code = "DAILY_REPORT_CONFLICT"

    def __init__(self, report_date: str):
        super().__init__(
            f"Failed to create daily report: a report for {report_date} already exists",
            details={"date": report_date},
        )


# ============================================================================
# Persistence
# ============================================================================


class DatabaseError(BaseAPIException):
    """Generic database failure."""

    error_code = "DATABASE_ERROR"


class RepositoryError(DatabaseError):
    """A repository operation failed for a reason other than conflict or absence."""

    error_code = "REPOSITORY_ERROR"


# ============================================================================
# Authentication
# ============================================================================


class MissingTokenError(BaseAPIException):
    """No bearer token was supplied."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "MISSING_TOKEN"

    def __init__(self, message: str = "Authorization token is required"):
        super().__init__(message)


class InvalidTokenError(BaseAPIException):
    """Bearer token could not be verified."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "INVALID_TOKEN"

    def __init__(self, message: str = "Invalid authorization token"):
        super().__init__(message)
