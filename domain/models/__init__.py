"""
Domain models for the Exercise Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- User: The aggregate root owning an ordered exercise log
- Exercise: A single logged activity (description, duration, date)
- LogQuery: Range and limit options for reading a log
- ExerciseLog / FormattedExercise: The rendered read-side view

Usage:
    >>> from domain.models import User, Exercise

    >>> user = User(id="u-1", username="fcc_test")
    >>> user = user.with_exercise(
    ...     Exercise(description="Pushups", duration=10, date="2020-01-01")
    ... )
"""

from domain.models.exercise import Exercise, RawDuration
from domain.models.exercise_log import ExerciseLog, FormattedExercise, LogQuery
from domain.models.user import User

__all__ = [
    # Main entities
    "User",
    "Exercise",
    "RawDuration",
    # Read side
    "LogQuery",
    "ExerciseLog",
    "FormattedExercise",
]
