"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- users: User registration, exercise logging and log query models
"""

from api.schemas.users import (
    AddExerciseRequest,
    CreatedUserResponse,
    CreateUserRequest,
    ExerciseAddedResponse,
    ExerciseLogResponse,
    LogEntryResponse,
    StoredExercise,
    UserDocumentResponse,
)

__all__ = [
    "CreateUserRequest",
    "AddExerciseRequest",
    "CreatedUserResponse",
    "StoredExercise",
    "UserDocumentResponse",
    "ExerciseAddedResponse",
    "LogEntryResponse",
    "ExerciseLogResponse",
]
