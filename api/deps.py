"""
FastAPI Dependency Providers for the Exercise Tracker API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings, the Supabase client and the in-memory store are cached per-process
- Supabase repositories and use cases are created per-request

Usage in routers:
    from api.deps import get_user_accounts_use_case
    from application.use_cases import UserAccountsUseCase

    @router.get("/api/users")
    def list_users(
        accounts: UserAccountsUseCase = Depends(get_user_accounts_use_case),
    ):
        return accounts.list_users()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_user_repo] = lambda: FakeUserRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import Clock, UserRepository

# Use cases
from application.use_cases import (
    GetExerciseLogUseCase,
    LogExerciseUseCase,
    UserAccountsUseCase,
)

# Concrete implementations
from infrastructure import (
    InMemoryUserRepository,
    SupabaseUserRepository,
    SystemClock,
)

from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


@lru_cache
def get_in_memory_user_repo() -> InMemoryUserRepository:
    """
    Get the process-wide in-memory user store.

    Cached so every request sees the same users.
    """
    return InMemoryUserRepository()


def get_user_repo(settings: Settings = Depends(get_settings)) -> UserRepository:
    """
    Get UserRepository implementation selected by ``settings.user_store``.

    The return type is the Protocol to enable easy mocking.

    Returns:
        UserRepository: Repository for user persistence
    """
    if settings.user_store == "supabase":
        return SupabaseUserRepository(
            get_supabase_client_required(),
            table=settings.users_table,
        )
    return get_in_memory_user_repo()


def get_clock() -> Clock:
    """Get the time source used for default exercise dates."""
    return SystemClock()


# =============================================================================
# Use Case Providers
# =============================================================================


def get_user_accounts_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
) -> UserAccountsUseCase:
    """Get UserAccountsUseCase with injected repository."""
    return UserAccountsUseCase(user_repo=user_repo)


def get_log_exercise_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
    clock: Clock = Depends(get_clock),
) -> LogExerciseUseCase:
    """Get LogExerciseUseCase with injected repository and clock."""
    return LogExerciseUseCase(user_repo=user_repo, clock=clock)


def get_exercise_log_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
) -> GetExerciseLogUseCase:
    """Get GetExerciseLogUseCase with injected repository."""
    return GetExerciseLogUseCase(user_repo=user_repo)


__all__ = [
    # Settings
    "get_settings",
    # Supabase
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_in_memory_user_repo",
    "get_user_repo",
    "get_clock",
    # Use cases
    "get_user_accounts_use_case",
    "get_log_exercise_use_case",
    "get_exercise_log_use_case",
]
