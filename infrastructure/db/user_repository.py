"""
Supabase User Repository Implementation.

This module implements the UserRepository protocol using Supabase as the
backend. Each user is one row holding the whole document:

    create table exercise_users (
        id uuid primary key default gen_random_uuid(),
        username text not null,
        log jsonb not null default '[]'::jsonb,
        created_at timestamptz not null default now()
    );
"""
import logging
import uuid
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import StoreFailureError, UserNotFoundError
from domain.models import Exercise, User

logger = logging.getLogger(__name__)

DEFAULT_USERS_TABLE = "exercise_users"


# ============================================================================
# Helper Functions (stateless utilities)
# ============================================================================

def is_valid_user_id(user_id: Any) -> bool:
    """Check that an identifier can be a row id (a UUID string)."""
    if not isinstance(user_id, str):
        return False
    try:
        uuid.UUID(user_id)
    except ValueError:
        return False
    return True


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert a users table row into a domain User."""
    return User(
        id=str(row["id"]),
        username=row["username"],
        log=[Exercise(**entry) for entry in row.get("log") or []],
    )


def user_to_log_payload(user: User) -> List[Dict[str, Any]]:
    """Serialize a user's log for the jsonb column."""
    return [exercise.model_dump() for exercise in user.log]


# ============================================================================
# Repository Implementation
# ============================================================================

class SupabaseUserRepository:
    """
    Supabase implementation of UserRepository protocol.

    Client failures are logged and re-raised as StoreFailureError so the
    API layer can answer with a generic server error.
    """

    def __init__(self, client: Client, table: str = DEFAULT_USERS_TABLE):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Name of the table holding user documents
        """
        self._client = client
        self._table = table

    def create(self, username: str) -> User:
        """Insert a new user row with an empty log."""
        try:
            result = (
                self._client.table(self._table)
                .insert({"username": username, "log": []})
                .execute()
            )
        except Exception as e:
            logger.exception("Error creating user %s", username)
            raise StoreFailureError("Failed to create user") from e

        if not result.data:
            logger.error("Insert into %s returned no rows", self._table)
            raise StoreFailureError("Failed to create user")
        return row_to_user(result.data[0])

    def get(self, user_id: str) -> Optional[User]:
        """Fetch a user row by id. Malformed ids return None without a query."""
        if not is_valid_user_id(user_id):
            return None

        try:
            result = (
                self._client.table(self._table)
                .select("id, username, log")
                .eq("id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.exception("Error fetching user %s", user_id)
            raise StoreFailureError("Failed to fetch user") from e

        if not result.data:
            return None
        return row_to_user(result.data[0])

    def list_all(self) -> List[User]:
        """Fetch all users ordered by creation time."""
        try:
            result = (
                self._client.table(self._table)
                .select("id, username, log")
                .order("created_at")
                .execute()
            )
        except Exception as e:
            logger.exception("Error listing users")
            raise StoreFailureError("Failed to list users") from e

        return [row_to_user(row) for row in result.data or []]

    def put(self, user: User) -> User:
        """Overwrite the stored username and log for an existing user."""
        try:
            result = (
                self._client.table(self._table)
                .update({"username": user.username, "log": user_to_log_payload(user)})
                .eq("id", user.id)
                .execute()
            )
        except Exception as e:
            logger.exception("Error saving user %s", user.id)
            raise StoreFailureError("Failed to save user") from e

        if not result.data:
            raise UserNotFoundError(user.id)
        return row_to_user(result.data[0])
