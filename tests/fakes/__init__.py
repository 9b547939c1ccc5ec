"""
Fake Implementations for Testing.

This package provides in-memory fake implementations of the application
ports for fast, isolated testing. No database or external dependencies required.

Features:
- Fakes implement the same Protocol interfaces as real implementations
- Supports seeding with raw documents and reset() for test isolation
- Supports simulated store failures
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeUserRepository, FixedClock, create_user_repo

    # Direct instantiation
    repo = FakeUserRepository()
    repo.seed([{"id": "u1", "username": "alice"}])

    # Factory function with pre-populated data
    repo = create_user_repo(username="alice", exercise_dates=["2020-01-01"])
"""
from typing import List, Optional

from tests.fakes.user_repository import FakeUserRepository
from tests.fakes.clock import FixedClock


# =============================================================================
# Factory Functions
# =============================================================================


def create_user_repo(
    *,
    user_id: str = "test-user",
    username: str = "test_user",
    exercise_dates: Optional[List[str]] = None,
) -> FakeUserRepository:
    """
    Create a FakeUserRepository holding one user.

    Args:
        user_id: ID of the seeded user
        username: Name of the seeded user
        exercise_dates: One exercise is logged per date, in the given order.
            Descriptions are "Exercise 1", "Exercise 2", ... and durations 10, 20, ...

    Returns:
        Pre-populated FakeUserRepository
    """
    repo = FakeUserRepository()
    log = [
        {
            "description": f"Exercise {i + 1}",
            "duration": (i + 1) * 10,
            "date": exercise_date,
        }
        for i, exercise_date in enumerate(exercise_dates or [])
    ]
    repo.seed([{"id": user_id, "username": username, "log": log}])
    return repo


__all__ = [
    "FakeUserRepository",
    "FixedClock",
    "create_user_repo",
]
