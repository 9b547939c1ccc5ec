"""
Infrastructure Database Layer.

This package provides implementations of the UserRepository interface
defined in application.ports. These implementations can be injected into
use cases and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseUserRepository,
        InMemoryUserRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    user_repo = SupabaseUserRepository(client, table="exercise_users")

    # Or keep everything in process
    user_repo = InMemoryUserRepository()
"""

from infrastructure.db.user_repository import SupabaseUserRepository
from infrastructure.db.memory_user_repository import InMemoryUserRepository

__all__ = [
    # User persistence
    "SupabaseUserRepository",
    "InMemoryUserRepository",
]
