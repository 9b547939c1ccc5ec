"""
User aggregate root - a named identity owning an exercise log.
"""

from typing import List

from pydantic import BaseModel, Field

from domain.models.exercise import Exercise


class User(BaseModel):
    """
    Aggregate root representing a registered user.

    The log is ordered by insertion, which is the order exercises were
    appended and not necessarily the order of their dates. Users are never
    deleted, and the only mutation is appending an exercise.

    Examples:
        >>> user = User(id="6f1c...", username="fcc_test")
        >>> user = user.with_exercise(
        ...     Exercise(description="Run", duration=30, date="2020-01-01")
        ... )
        >>> user.exercise_count
        1
    """

    id: str = Field(..., min_length=1, description="Store-generated unique identifier")
    username: str = Field(..., min_length=1, description="Display name (not unique)")
    log: List[Exercise] = Field(
        default_factory=list,
        description="Exercises in insertion order",
    )

    @property
    def exercise_count(self) -> int:
        """Number of exercises in the log."""
        return len(self.log)

    def with_exercise(self, exercise: Exercise) -> "User":
        """
        Return a copy of this user with ``exercise`` appended to the log.

        The receiver is left untouched so a failed persist never leaves a
        half-mutated user behind.
        """
        return self.model_copy(update={"log": [*self.log, exercise]})
