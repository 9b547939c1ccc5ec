"""
Infrastructure Layer for the Exercise Tracker API.

This package contains concrete implementations of the application ports:
- db/: Supabase and in-memory user repositories
- clock: System time source
"""

# Re-export adapters for convenient access
from infrastructure.db import (
    SupabaseUserRepository,
    InMemoryUserRepository,
)
from infrastructure.clock import SystemClock

__all__ = [
    "SupabaseUserRepository",
    "InMemoryUserRepository",
    "SystemClock",
]
