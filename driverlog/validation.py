"""Daily report validation rules.

Field rules (formats and ranges) are declared on ``DailyReportPayload``.
Cross-field rules are evaluated here, after the field rules and also when
only format or range rules failed; a missing or wrongly typed field skips
them. All cross-field rules are evaluated so a caller sees every violation
at once.

Two rules are stricter than the metrics calculator: a shift that crosses
midnight fails the time-order rule, and an odometer rollover fails the
odometer-order rule, even though ``compute_working_hours`` and
``compute_distance`` both handle those inputs.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from driverlog.exceptions import ReportValidationError
from driverlog.schemas.daily_reports import (
    TIME_PATTERN,
    DailyReportPayload,
    normalize_time,
)

WORKED_DAY_FIELDS_REQUIRED = (
    "Worked days require start time, end time, start odometer and end odometer"
)
END_TIME_NOT_AFTER_START = "End time must be later than start time"
END_ODOMETER_BELOW_START = "End odometer must be greater than or equal to start odometer"

FieldErrors = dict[str, list[str]]


@dataclass
class ReportValidationResult:
    """Outcome of validating a raw report payload."""

    report: Optional[DailyReportPayload] = None
    errors: FieldErrors = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.report is not None and not self.errors


def _add(errors: FieldErrors, name: str, message: str) -> None:
    errors.setdefault(name, []).append(message)


def cross_field_errors(report: DailyReportPayload) -> FieldErrors:
    """Evaluate the cross-field rules on a parsed or partially parsed payload."""
    errors: FieldErrors = {}

    if report.is_worked and (
        not report.start_time
        or not report.end_time
        or report.start_odometer is None
        or report.end_odometer is None
    ):
        _add(errors, "is_worked", WORKED_DAY_FIELDS_REQUIRED)

    # Lexical comparison on zero-padded HH:MM
    if report.start_time and report.end_time and not report.end_time > report.start_time:
        _add(errors, "end_time", END_TIME_NOT_AFTER_START)

    if (
        report.start_odometer is not None
        and report.end_odometer is not None
        and report.end_odometer < report.start_odometer
    ):
        _add(errors, "end_odometer", END_ODOMETER_BELOW_START)

    return errors


def field_errors_from_pydantic(exc: ValidationError) -> FieldErrors:
    """Flatten a pydantic ValidationError into field -> messages."""
    errors: FieldErrors = {}
    for error in exc.errors():
        loc = error.get("loc") or ("__root__",)
        name = ".".join(str(part) for part in loc)
        _add(errors, name, clean_message(error))
    return errors


def clean_message(error: Mapping[str, Any]) -> str:
    """Message of one pydantic error, without the "Value error, " prefix."""
    message = error.get("msg", "Invalid value")
    # "Value error, Date is required" -> "Date is required"
    if error.get("type") == "value_error" and message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return message


def _is_type_failure(error: Mapping[str, Any]) -> bool:
    return error["type"] == "missing" or error["type"].endswith("_type")


def _partial_report(
    payload: Mapping[str, Any], exc: ValidationError
) -> Optional[DailyReportPayload]:
    """
    Best-effort view of a payload that only broke format or range rules.

    Values that failed a rule are kept as given, so the cross-field rules can
    still judge them. Returns None when a field is missing or has the wrong
    type, since the payload then has no usable shape.
    """
    if any(_is_type_failure(error) for error in exc.errors()):
        return None

    values = dict(payload)
    if "highway_fee" not in values and "toll_fee" in values:
        values["highway_fee"] = values["toll_fee"]
    for name in ("start_time", "end_time"):
        value = values.get(name)
        if isinstance(value, str) and re.match(TIME_PATTERN, value):
            values[name] = normalize_time(value)

    return DailyReportPayload.model_construct(
        **{name: values.get(name) for name in DailyReportPayload.model_fields}
    )


def validate_report(payload: Mapping[str, Any]) -> ReportValidationResult:
    """
    Validate a raw payload; never raises for bad input.

    Cross-field rules also run when only format or range rules failed, and
    their messages are merged with the field messages.
    """
    try:
        report = DailyReportPayload.model_validate(dict(payload))
    except ValidationError as e:
        errors = field_errors_from_pydantic(e)
        partial = _partial_report(payload, e)
        if partial is not None:
            for name, messages in cross_field_errors(partial).items():
                errors.setdefault(name, []).extend(messages)
        return ReportValidationResult(errors=errors)

    errors = cross_field_errors(report)
    if errors:
        return ReportValidationResult(errors=errors)
    return ReportValidationResult(report=report)


def ensure_valid_report(payload: Mapping[str, Any]) -> DailyReportPayload:
    """Accepted payload, or ReportValidationError carrying every field message."""
    result = validate_report(payload)
    if not result.is_valid:
        raise ReportValidationError(result.errors)
    return result.report
