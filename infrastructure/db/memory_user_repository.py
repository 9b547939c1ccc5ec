"""
In-memory implementation of UserRepository.

Process-local store used when no external database is configured
(``USER_STORE=memory``). Data lives for the lifetime of the process.
"""
import logging
import uuid
from threading import Lock
from typing import Dict, List, Optional

from application.exceptions import UserNotFoundError
from domain.models import User

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    """
    In-memory implementation of UserRepository protocol.

    Users are kept in an insertion-ordered dict keyed by uuid4 strings.
    Reads return copies, so a caller's changes are only visible to others
    after ``put``. The lock protects the dict itself; it does not make a
    get-then-put sequence atomic.
    """

    def __init__(self) -> None:
        """Initialize with empty storage."""
        self._users: Dict[str, User] = {}
        self._lock = Lock()

    def create(self, username: str) -> User:
        """Create and store a new user with an empty log."""
        user = User(id=str(uuid.uuid4()), username=username)
        with self._lock:
            self._users[user.id] = user
        logger.debug("Stored new user %s in memory", user.id)
        return user.model_copy(deep=True)

    def get(self, user_id: str) -> Optional[User]:
        """Get a user by identifier. Unknown or malformed ids return None."""
        with self._lock:
            user = self._users.get(user_id)
        return user.model_copy(deep=True) if user is not None else None

    def list_all(self) -> List[User]:
        """Get every user in creation order."""
        with self._lock:
            users = list(self._users.values())
        return [user.model_copy(deep=True) for user in users]

    def put(self, user: User) -> User:
        """Replace the stored document for an existing user."""
        with self._lock:
            if user.id not in self._users:
                raise UserNotFoundError(user.id)
            self._users[user.id] = user.model_copy(deep=True)
        return user
