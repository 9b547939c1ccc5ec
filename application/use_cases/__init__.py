"""
Application Use Cases for the Exercise Tracker API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import (
        UserAccountsUseCase,
        CreateUserInput,
        LogExerciseUseCase,
        AppendExerciseInput,
        GetExerciseLogUseCase,
    )

    accounts = UserAccountsUseCase(user_repo=user_repo)
    user = accounts.create_user(CreateUserInput(username="fcc_test"))

    log_exercise = LogExerciseUseCase(user_repo=user_repo, clock=clock)
    result = log_exercise.execute(
        user.id,
        AppendExerciseInput(description="Run", duration=30, date="2020-01-01"),
    )

    get_log = GetExerciseLogUseCase(user_repo=user_repo)
    exercise_log = get_log.execute(
        user.id,
        LogQuery(from_date="2020-01-01", to_date="2020-12-31", limit=10),
    )
"""

from application.use_cases.user_accounts import (
    CreateUserInput,
    UserAccountsUseCase,
    require_user,
)
from application.use_cases.log_exercise import (
    AppendExerciseInput,
    LogExerciseResult,
    LogExerciseUseCase,
)
from application.use_cases.get_exercise_log import GetExerciseLogUseCase

__all__ = [
    # UserAccounts
    "UserAccountsUseCase",
    "CreateUserInput",
    "require_user",
    # LogExercise
    "LogExerciseUseCase",
    "AppendExerciseInput",
    "LogExerciseResult",
    # GetExerciseLog
    "GetExerciseLogUseCase",
]
