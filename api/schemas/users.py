"""
Pydantic models for the users and exercise log endpoints.

Request models make every field optional so that a missing required field
reaches the use case's validation step and comes back as a 400 with a
readable message, rather than as FastAPI's generic 422.

Response models expose identifiers as ``_id`` on the wire.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.models import RawDuration
from domain.services.dates import from_epoch_millis


# =============================================================================
# Request Models
# =============================================================================


class CreateUserRequest(BaseModel):
    """Body of POST /api/users."""

    model_config = ConfigDict(extra="ignore")

    username: Optional[str] = Field(None, examples=["fcc_test"])


class AddExerciseRequest(BaseModel):
    """Body of POST /api/users/{user_id}/exercises."""

    model_config = ConfigDict(extra="ignore")

    description: Optional[str] = Field(None, examples=["Morning run"])
    duration: RawDuration = Field(None, examples=[30, "45"])
    date: Optional[str] = Field(None, examples=["2020-01-01"])

    @field_validator("description", mode="before")
    @classmethod
    def numbers_as_text(cls, v: Any) -> Any:
        """Accept numeric descriptions as text."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("duration", mode="before")
    @classmethod
    def reject_boolean_duration(cls, v: Any) -> Any:
        """Booleans would otherwise be coerced to 0 or 1."""
        if isinstance(v, bool):
            raise ValueError("duration must be a number or numeric text")
        return v

    @field_validator("date", mode="before")
    @classmethod
    def epoch_millis_as_timestamp(cls, v: Any) -> Any:
        """Accept numeric dates as milliseconds since the epoch."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            # Out-of-range numbers are kept as text and read back as Invalid Date
            return from_epoch_millis(v) or str(v)
        return v


# =============================================================================
# Response Models
# =============================================================================


class _IdentifiedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")


class CreatedUserResponse(_IdentifiedModel):
    """Response of POST /api/users."""

    username: str


class StoredExercise(BaseModel):
    """An exercise as stored, before read-time formatting."""

    description: str
    duration: RawDuration
    date: str


class UserDocumentResponse(_IdentifiedModel):
    """One entry of GET /api/users."""

    username: str
    log: List[StoredExercise] = Field(default_factory=list)


class ExerciseAddedResponse(_IdentifiedModel):
    """Response of POST /api/users/{user_id}/exercises. ``_id`` is the user id."""

    username: str
    description: str
    duration: Optional[int]
    date: str


class LogEntryResponse(BaseModel):
    """One rendered entry of an exercise log."""

    description: str
    duration: Optional[int]
    date: str


class ExerciseLogResponse(_IdentifiedModel):
    """Response of GET /api/users/{user_id}/logs."""

    username: str
    count: int
    log: List[LogEntryResponse] = Field(default_factory=list)
