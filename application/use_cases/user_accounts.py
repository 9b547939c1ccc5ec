"""
User Accounts Use Case.

Registration, listing and lookup of users. Together with LogExerciseUseCase
this forms the identity store the log queries read from.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from application.exceptions import UserNotFoundError, UserValidationError
from application.ports import UserRepository
from domain.models import User

logger = logging.getLogger(__name__)


@dataclass
class CreateUserInput:
    """Input for registering a user. ``username`` is required."""

    username: Optional[str] = None


def require_user(user_repo: UserRepository, user_id: str) -> User:
    """
    Look up a user or raise.

    Args:
        user_repo: Repository to read from
        user_id: Identifier from the caller (may be malformed)

    Returns:
        The stored User

    Raises:
        UserNotFoundError: If no user matches ``user_id``
    """
    user = user_repo.get(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


class UserAccountsUseCase:
    """
    Use case for creating and reading users.

    Usage:
        >>> use_case = UserAccountsUseCase(user_repo=user_repo)
        >>> user = use_case.create_user(CreateUserInput(username="fcc_test"))
        >>> use_case.get_user(user.id).log
        []
    """

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize with required dependencies.

        Args:
            user_repo: Repository for user persistence
        """
        self._user_repo = user_repo

    def create_user(self, data: CreateUserInput) -> User:
        """
        Register a new user with an empty log.

        Duplicate usernames are allowed.

        Raises:
            UserValidationError: If the username is missing or blank
        """
        if data.username is None or not data.username.strip():
            logger.warning("Rejected user registration without username")
            raise UserValidationError("Username is required", field="username")

        user = self._user_repo.create(data.username)
        logger.info("Registered user %s (%s)", user.id, user.username)
        return user

    def list_users(self) -> List[User]:
        """Return all users with their full logs, in store order."""
        return self._user_repo.list_all()

    def get_user(self, user_id: str) -> User:
        """
        Get a single user by identifier.

        Raises:
            UserNotFoundError: If the user does not exist or the id is malformed
        """
        return require_user(self._user_repo, user_id)
