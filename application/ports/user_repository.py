"""
User Repository Interface (Port).

This module defines the abstract interface for user persistence. Users are
stored as whole documents (username plus embedded exercise log); callers
read a user, change it in memory and ``put`` it back. That read-modify-write
is not transactional: concurrent appends to the same user are last-write-wins.
"""
from typing import List, Optional, Protocol

from domain.models import User


class UserRepository(Protocol):
    """
    Abstract interface for user document persistence.

    Implementations raise ``StoreFailureError`` when the backing store
    fails. ``get`` returns None for unknown or malformed identifiers;
    ``put`` raises ``UserNotFoundError`` when the user no longer exists.
    """

    def create(self, username: str) -> User:
        """
        Create and persist a new user with an empty log.

        Args:
            username: Display name (already validated as non-empty)

        Returns:
            The stored User, including its generated identifier
        """
        ...

    def get(self, user_id: str) -> Optional[User]:
        """
        Get a user by identifier.

        Args:
            user_id: Identifier as received from the caller (may be malformed)

        Returns:
            User if found, None otherwise
        """
        ...

    def list_all(self) -> List[User]:
        """
        Get every stored user with its full log.

        Returns:
            Users in a stable store order (creation order)
        """
        ...

    def put(self, user: User) -> User:
        """
        Persist the full user document, replacing what is stored.

        Args:
            user: User to save (must already exist)

        Returns:
            The saved User
        """
        ...
