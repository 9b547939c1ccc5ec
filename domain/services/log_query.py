"""
Exercise log query pipeline.

Pure functions over a user's in-memory log. Writes go through
``normalize_exercise`` once; reads run the stages in fixed order:

1. Range filter - only when both bounds are present, inclusive
2. Limit - head of the (filtered) sequence, order preserved
3. Format - integer durations and display dates

Nothing in this module touches a repository or blocks.
"""

import logging
import math
import re
from datetime import date, datetime
from typing import List, Optional, Sequence

from domain.models import Exercise, ExerciseLog, FormattedExercise, LogQuery, RawDuration, User
from domain.services.dates import (
    ParsedDate,
    ValidDate,
    format_log_date,
    parse_log_date,
    to_storage_timestamp,
)

logger = logging.getLogger(__name__)

_LEADING_INTEGER_RE = re.compile(r"^\s*([+-]?\d+)")


# =============================================================================
# Normalize-on-write
# =============================================================================


def normalize_exercise(
    description: str,
    duration: RawDuration,
    date_value: Optional[str],
    now: datetime,
) -> Exercise:
    """
    Build the Exercise that gets appended to a user's log.

    A missing or blank date becomes the current timestamp. Duration is
    stored untouched.

    Args:
        description: Free-text description
        duration: Duration exactly as submitted
        date_value: Optional client-supplied date string
        now: Current instant from the injected clock

    Returns:
        Exercise ready to append
    """
    if date_value is None or not date_value.strip():
        date_value = to_storage_timestamp(now)
    return Exercise(description=description, duration=duration, date=date_value)


# =============================================================================
# Read stages
# =============================================================================


def coerce_duration(value: RawDuration) -> Optional[int]:
    """
    Render a stored duration as an integer.

    Numbers are truncated toward zero. Strings yield their leading integer
    digits ("30" -> 30, "30.9" -> 30, "-2.5" -> -2). Anything without a
    numeric reading (including NaN, infinities and digit runs too long to
    convert) returns None, the not-a-number marker. Never raises.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INTEGER_RE.match(value)
        if match is None:
            return None
        try:
            return int(match.group(1))
        except ValueError:
            # Digit runs past the interpreter's int conversion limit
            return None
    return None


def _in_range(parsed: ParsedDate, lower: date, upper: date) -> bool:
    return isinstance(parsed, ValidDate) and lower <= parsed.value <= upper


def filter_by_range(
    exercises: Sequence[Exercise],
    from_date: str,
    to_date: str,
) -> List[Exercise]:
    """
    Keep exercises whose calendar date lies in ``[from_date, to_date]``.

    Exercises with unparsable dates never match. If either bound fails to
    parse, no exercise matches.
    """
    lower = parse_log_date(from_date)
    upper = parse_log_date(to_date)
    if not isinstance(lower, ValidDate) or not isinstance(upper, ValidDate):
        logger.debug("Unparsable range bound from=%r to=%r", from_date, to_date)
        return []

    return [
        exercise
        for exercise in exercises
        if _in_range(parse_log_date(exercise.date), lower.value, upper.value)
    ]


def apply_limit(exercises: Sequence[Exercise], limit: Optional[int]) -> List[Exercise]:
    """Return at most the first ``limit`` exercises (all of them when limit is None)."""
    if limit is None:
        return list(exercises)
    if limit < 0:
        raise ValueError("limit must be non-negative")
    return list(exercises[:limit])


def format_exercise(exercise: Exercise) -> FormattedExercise:
    """Render one exercise for reading."""
    return FormattedExercise(
        description=exercise.description,
        duration=coerce_duration(exercise.duration),
        date=format_log_date(exercise.date),
    )


def query_log(user: User, query: LogQuery) -> ExerciseLog:
    """
    Run the read pipeline over a user's log.

    Args:
        user: User whose log is read
        query: Range and limit options

    Returns:
        ExerciseLog with ``count`` equal to the number of returned entries
    """
    entries: List[Exercise] = list(user.log)

    if query.has_range:
        entries = filter_by_range(entries, query.from_date, query.to_date)

    if query.limit is not None:
        entries = apply_limit(entries, query.limit)

    formatted = [format_exercise(exercise) for exercise in entries]
    return ExerciseLog(
        user_id=user.id,
        username=user.username,
        count=len(formatted),
        log=formatted,
    )
