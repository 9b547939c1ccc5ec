"""
Interfaces (Ports) for the Exercise Tracker API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, system time). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import UserRepository, Clock

    class LogExerciseUseCase:
        def __init__(self, user_repo: UserRepository, clock: Clock):
            self._user_repo = user_repo
            self._clock = clock
"""

# User persistence
from application.ports.user_repository import UserRepository

# Time source
from application.ports.clock import Clock

__all__ = [
    "UserRepository",
    "Clock",
]
