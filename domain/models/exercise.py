"""
Exercise value object for user exercise logs.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


# Durations are stored exactly as submitted; coercion happens at read time.
RawDuration = Union[int, float, str, None]


class Exercise(BaseModel):
    """
    One logged activity entry belonging to a user's log.

    Exercises are immutable once appended and carry no identity of their
    own. ``duration`` keeps whatever numeric or numeric-like value the
    client sent and ``date`` keeps the stored date string; both are
    normalized for display by ``domain.services.log_query``.

    Examples:
        >>> Exercise(description="Run", duration="30", date="2020-01-01")
        Exercise(description='Run', duration='30', date='2020-01-01')
    """

    model_config = ConfigDict(frozen=True)

    description: str = Field(..., description="Free-text description of the activity")
    duration: RawDuration = Field(..., description="Duration as submitted (minutes)")
    date: str = Field(..., description="Stored date string (ISO-8601 or legacy display form)")
