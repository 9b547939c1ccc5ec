"""
Get Exercise Log Use Case.

Loads a user and runs the log query pipeline over their exercises.
"""
from application.ports import UserRepository
from application.use_cases.user_accounts import require_user
from domain.models import ExerciseLog, LogQuery
from domain.services.log_query import query_log


class GetExerciseLogUseCase:
    """
    Use case for reading a user's exercise log.

    The range filter applies only when both bounds are given; the limit
    applies after filtering.
    """

    def __init__(self, user_repo: UserRepository):
        """
        Initialize with required dependencies.

        Args:
            user_repo: Repository for user persistence
        """
        self._user_repo = user_repo

    def execute(self, user_id: str, query: LogQuery) -> ExerciseLog:
        """
        Get the filtered and limited log for a user.

        Args:
            user_id: ID of the user whose log is read
            query: Range and limit options

        Returns:
            ExerciseLog with rendered entries

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = require_user(self._user_repo, user_id)
        return query_log(user, query)
