"""Derived metrics for daily reports.

Both calculators are total: missing or unparseable input yields zero rather
than an error.
"""

from typing import Optional

ODOMETER_MAX = 999999
MINUTES_PER_DAY = 24 * 60


def compute_distance(start_odometer: Optional[int], end_odometer: Optional[int]) -> int:
    """Distance travelled between two odometer readings.

    When the end reading is below the start reading the odometer is assumed
    to have wrapped past ODOMETER_MAX back to zero.
    """
    if start_odometer is None or end_odometer is None:
        return 0

    if end_odometer >= start_odometer:
        return end_odometer - start_odometer

    return ODOMETER_MAX - start_odometer + end_odometer + 1


def _to_minutes(value: str) -> Optional[int]:
    hours, sep, minutes = value.partition(":")
    if not sep:
        return None
    try:
        return int(hours) * 60 + int(minutes)
    except ValueError:
        return None


def compute_working_hours(start_time: Optional[str], end_time: Optional[str]) -> float:
    """Hours between two HH:MM times, crossing midnight when end < start."""
    if not start_time or not end_time:
        return 0.0

    start_minutes = _to_minutes(start_time)
    end_minutes = _to_minutes(end_time)
    if start_minutes is None or end_minutes is None:
        return 0.0

    if end_minutes < start_minutes:
        end_minutes += MINUTES_PER_DAY

    return (end_minutes - start_minutes) / 60
