"""
Time-related utilities.

Timestamps are UTC ISO-8601 strings with an explicit offset so that they
sort lexicographically in the DynamoDB ``created_at`` range key.
"""

from datetime import date, datetime, timezone

from core.utils.constants import API_DATE_FORMAT, DATE_FORMAT


def utc_now_iso() -> str:
    """Return current UTC time in ISO-8601 format.

    Example:
        2024-01-15T10:42:31.123456+00:00
    """
    return datetime.now(timezone.utc).isoformat()


def parse_incident_date(value: str) -> date:
    """Parse a calendar date in YYYY-MM-DD form.

    Raises:
        ValueError: If the value is not a valid date in that format
    """
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"Invalid date format. Expected {API_DATE_FORMAT}, got '{value}'"
        ) from exc
