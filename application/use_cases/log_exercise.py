"""
LogExercise Use Case.

Appends a normalized exercise to a user's log and persists the user.

The lookup and the save are separate store calls with no transaction
around them, so two concurrent appends to the same user are
last-write-wins at the store.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.exceptions import UserValidationError
from application.ports import Clock, UserRepository
from application.use_cases.user_accounts import require_user
from domain.models import Exercise, FormattedExercise, RawDuration, User
from domain.services.log_query import format_exercise, normalize_exercise

logger = logging.getLogger(__name__)


@dataclass
class AppendExerciseInput:
    """Input for appending an exercise.

    ``description`` and ``duration`` are required, ``date`` is optional.
    """

    description: Optional[str] = None
    duration: RawDuration = None
    date: Optional[str] = None


@dataclass
class LogExerciseResult:
    """Result of the LogExercise use case execution."""

    user: User
    exercise: Exercise
    formatted: FormattedExercise


class LogExerciseUseCase:
    """
    Use case for appending exercises to a user's log.

    Orchestrates the following workflow:
    1. Validate required fields
    2. Look up the user (NotFound if missing)
    3. Normalize the exercise (default date from the clock) and render it
    4. Append and persist the user
    5. Return the user, the stored exercise and its rendered form

    Usage:
        >>> use_case = LogExerciseUseCase(user_repo=user_repo, clock=SystemClock())
        >>> result = use_case.execute(
        ...     user.id,
        ...     AppendExerciseInput(description="Run", duration="30"),
        ... )
        >>> result.formatted.duration
        30
    """

    def __init__(self, user_repo: UserRepository, clock: Clock) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            user_repo: Repository for user persistence
            clock: Time source for the default exercise date
        """
        self._user_repo = user_repo
        self._clock = clock

    def execute(self, user_id: str, data: AppendExerciseInput) -> LogExerciseResult:
        """
        Execute the append workflow.

        Raises:
            UserValidationError: If description or duration is missing
            UserNotFoundError: If the user does not exist
            StoreFailureError: If the store fails to read or save
        """
        self._validate(data)

        user = require_user(self._user_repo, user_id)

        exercise = normalize_exercise(
            description=data.description,
            duration=data.duration,
            date_value=data.date,
            now=self._clock.now(),
        )
        # Render first so nothing is persisted unless the response can be built
        formatted = format_exercise(exercise)
        saved = self._user_repo.put(user.with_exercise(exercise))

        logger.info(
            "Appended exercise to user %s (log size %d)", saved.id, saved.exercise_count
        )
        return LogExerciseResult(
            user=saved,
            exercise=exercise,
            formatted=formatted,
        )

    def _validate(self, data: AppendExerciseInput) -> None:
        if data.description is None or not data.description.strip():
            logger.warning("Rejected exercise without description")
            raise UserValidationError("Description is required", field="description")

        duration = data.duration
        if duration is None or (isinstance(duration, str) and not duration.strip()):
            logger.warning("Rejected exercise without duration")
            raise UserValidationError("Duration is required", field="duration")
