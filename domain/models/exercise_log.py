"""
Read-side models for exercise log queries.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


class LogQuery(BaseModel):
    """
    Filter and limit options for reading a user's log.

    The range filter only applies when both ``from_date`` and ``to_date``
    are present. A single bound leaves the log unfiltered.
    """

    from_date: Optional[str] = Field(default=None, description="Inclusive lower date bound")
    to_date: Optional[str] = Field(default=None, description="Inclusive upper date bound")
    limit: Optional[int] = Field(default=None, ge=0, description="Maximum entries to return")

    @field_validator("limit", mode="before")
    @classmethod
    def blank_limit_is_absent(cls, v: Any) -> Any:
        """Treat an empty ``limit`` query value as not supplied."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def has_range(self) -> bool:
        """True when both bounds were supplied and non-empty."""
        return bool(self.from_date) and bool(self.to_date)


class FormattedExercise(BaseModel):
    """An exercise rendered for reading."""

    description: str
    # None is the not-a-number marker for durations that are not numeric.
    duration: Optional[int]
    date: str


class ExerciseLog(BaseModel):
    """Result of a log query."""

    user_id: str
    username: str
    count: int
    log: List[FormattedExercise] = Field(default_factory=list)
