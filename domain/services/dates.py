"""
Date parsing and display for exercise logs.

Every stored exercise date and every query bound goes through
``parse_log_date``, which returns a tagged result instead of raising.
Range filtering and formatting both consume that result, so the rule
"unparsable dates never match a range and render as Invalid Date" lives
here and nowhere else.

Accepted inputs:
- ISO-8601 calendar dates and timestamps ("2020-01-01",
  "2020-01-01T10:00:00Z", "2020-01-01T10:00:00+02:00")
- The legacy display forms ("Mon Jan 01 1990" and
  "Mon Jan 01 1990 10:00:00 GMT+0000 (Coordinated Universal Time)")

Numeric request dates (milliseconds since the epoch) are converted to the
ISO form by ``from_epoch_millis`` before they are stored.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Optional, Union

INVALID_DATE = "Invalid Date"

WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_LEGACY_DISPLAY_RE = re.compile(
    r"^(?:Mon|Tue|Wed|Thu|Fri|Sat|Sun) "
    r"(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec) "
    r"(\d{1,2}) (\d{4})(?:\s|$)"
)


@dataclass(frozen=True)
class ValidDate:
    """A stored value that resolved to a calendar date."""

    value: date


@dataclass(frozen=True)
class UnparsableDate:
    """A stored value that could not be read as a date."""

    raw: Any


ParsedDate = Union[ValidDate, UnparsableDate]


def _from_datetime(value: datetime) -> date:
    # Aware timestamps are compared on their UTC calendar day.
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.date()


def _parse_iso(text: str) -> date:
    return _from_datetime(datetime.fromisoformat(text.replace("Z", "+00:00")))


def _parse_legacy_display(text: str) -> date:
    match = _LEGACY_DISPLAY_RE.match(text)
    if match is None:
        raise ValueError(f"not a legacy display date: {text!r}")
    month_name, day, year = match.groups()
    return date(int(year), MONTH_ABBREVIATIONS.index(month_name) + 1, int(day))


def parse_log_date(value: Any) -> ParsedDate:
    """
    Parse a stored date or a query bound into a calendar date.

    Args:
        value: Stored date string (or a date/datetime instance)

    Returns:
        ValidDate on success, UnparsableDate otherwise. Never raises.
    """
    if isinstance(value, datetime):
        return ValidDate(_from_datetime(value))
    if isinstance(value, date):
        return ValidDate(value)
    if not isinstance(value, str) or not value.strip():
        return UnparsableDate(value)

    text = value.strip()
    for parser in (_parse_iso, _parse_legacy_display):
        try:
            return ValidDate(parser(text))
        except ValueError:
            continue
    return UnparsableDate(value)


def format_calendar_date(value: date) -> str:
    """Render a date as "Mon Jan 01 1990"."""
    return (
        f"{WEEKDAY_ABBREVIATIONS[value.weekday()]} "
        f"{MONTH_ABBREVIATIONS[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )


def format_log_date(value: Any) -> str:
    """Render a stored date for display, or ``INVALID_DATE`` if it does not parse."""
    parsed = parse_log_date(value)
    if isinstance(parsed, ValidDate):
        return format_calendar_date(parsed.value)
    return INVALID_DATE


def from_epoch_millis(value: Union[int, float]) -> Optional[str]:
    """
    Convert a millisecond Unix timestamp into the stored ISO-8601 form.

    Returns None when the value is outside the representable range.
    """
    try:
        moment = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
    return to_storage_timestamp(moment)


def to_storage_timestamp(moment: datetime) -> str:
    """Serialize a clock reading into the ISO-8601 form stored on exercises."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.isoformat()
