"""
API package for the Exercise Tracker API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request and response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_user_repo,
    get_clock,
    get_user_accounts_use_case,
    get_log_exercise_use_case,
    get_exercise_log_use_case,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_user_repo",
    "get_clock",
    # Use cases
    "get_user_accounts_use_case",
    "get_log_exercise_use_case",
    "get_exercise_log_use_case",
]
