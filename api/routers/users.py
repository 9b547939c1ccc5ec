"""
Users router for registration, exercise logging and log queries.

This router contains endpoints for:
- POST /api/users - Register a user
- GET /api/users - List all users with their stored logs
- POST /api/users/{user_id}/exercises - Append an exercise to a user's log
- GET /api/users/{user_id}/logs - Read a user's log (from/to/limit)

Request bodies may be JSON or form encoded.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import ValidationError

from api.deps import (
    get_exercise_log_use_case,
    get_log_exercise_use_case,
    get_user_accounts_use_case,
)
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
from application.exceptions import (
    StoreFailureError,
    UserNotFoundError,
    UserValidationError,
)
from application.use_cases import (
    AppendExerciseInput,
    CreateUserInput,
    GetExerciseLogUseCase,
    LogExerciseUseCase,
    UserAccountsUseCase,
)
from domain.models import LogQuery, User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/users",
    tags=["Users"],
)

SERVER_ERROR_DETAIL = "Server error"


# =============================================================================
# Helper Functions
# =============================================================================


async def _read_body(request: Request) -> Dict[str, Any]:
    """Read a JSON or form-encoded body into a plain dict."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Malformed JSON body")
        if not isinstance(payload, dict):
            raise HTTPException(status_code=400, detail="Request body must be an object")
        return payload

    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


async def create_user_body(request: Request) -> CreateUserRequest:
    """Parse the registration body."""
    try:
        return CreateUserRequest.model_validate(await _read_body(request))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid user data: {e.errors()[0]['msg']}")


async def add_exercise_body(request: Request) -> AddExerciseRequest:
    """Parse the exercise body."""
    try:
        return AddExerciseRequest.model_validate(await _read_body(request))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid exercise data: {e.errors()[0]['msg']}")


@contextmanager
def _translate_errors(action: str) -> Iterator[None]:
    """Map application errors raised inside the block to HTTP errors."""
    try:
        yield
    except UserValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except StoreFailureError:
        # Adapter already logged the cause
        raise HTTPException(status_code=500, detail=SERVER_ERROR_DETAIL)
    except Exception as e:
        logger.exception(f"Unexpected error while {action}: {e}")
        raise HTTPException(status_code=500, detail=SERVER_ERROR_DETAIL)


def _user_document(user: User) -> UserDocumentResponse:
    return UserDocumentResponse(
        id=user.id,
        username=user.username,
        log=[StoredExercise(**exercise.model_dump()) for exercise in user.log],
    )


# =============================================================================
# User Endpoints
# =============================================================================


@router.post("", response_model=CreatedUserResponse)
def create_user_endpoint(
    body: CreateUserRequest = Depends(create_user_body),
    accounts: UserAccountsUseCase = Depends(get_user_accounts_use_case),
):
    """
    Register a new user.

    Returns:
        The username and generated ``_id``. 400 if username is missing.
    """
    with _translate_errors("creating user"):
        user = accounts.create_user(CreateUserInput(username=body.username))

    return CreatedUserResponse(id=user.id, username=user.username)


@router.get("", response_model=List[UserDocumentResponse])
def list_users_endpoint(
    accounts: UserAccountsUseCase = Depends(get_user_accounts_use_case),
):
    """
    List every user with their stored exercise log.

    Logs are returned as stored, without read-time formatting.
    """
    with _translate_errors("listing users"):
        users = accounts.list_users()

    return [_user_document(user) for user in users]


# =============================================================================
# Exercise Endpoints
# =============================================================================


@router.post("/{user_id}/exercises", response_model=ExerciseAddedResponse)
def add_exercise_endpoint(
    user_id: str,
    body: AddExerciseRequest = Depends(add_exercise_body),
    log_exercise: LogExerciseUseCase = Depends(get_log_exercise_use_case),
):
    """
    Append an exercise to a user's log.

    ``date`` defaults to now when omitted.

    Returns:
        The user's name, the rendered exercise and the user's ``_id``.
        400 if description or duration is missing, 404 if the user is unknown.
    """
    with _translate_errors("adding exercise"):
        result = log_exercise.execute(
            user_id,
            AppendExerciseInput(
                description=body.description,
                duration=body.duration,
                date=body.date,
            ),
        )

    return ExerciseAddedResponse(
        id=result.user.id,
        username=result.user.username,
        description=result.formatted.description,
        duration=result.formatted.duration,
        date=result.formatted.date,
    )


@router.get("/{user_id}/logs", response_model=ExerciseLogResponse)
def get_logs_endpoint(
    user_id: str,
    from_date: Optional[str] = Query(None, alias="from", description="Inclusive lower date bound"),
    to_date: Optional[str] = Query(None, alias="to", description="Inclusive upper date bound"),
    limit: Optional[str] = Query(None, description="Maximum number of entries"),
    get_log: GetExerciseLogUseCase = Depends(get_exercise_log_use_case),
):
    """
    Get a user's exercise log.

    The date range applies only when both ``from`` and ``to`` are given.
    ``limit`` keeps the first entries after filtering.

    Returns:
        ``_id``, ``username``, ``count`` and the rendered ``log``.
        404 if the user is unknown, 400 if limit is not a non-negative integer.
    """
    try:
        query = LogQuery(from_date=from_date, to_date=to_date, limit=limit)
    except ValidationError:
        raise HTTPException(status_code=400, detail="limit must be a non-negative integer")

    with _translate_errors("reading exercise log"):
        exercise_log = get_log.execute(user_id, query)

    return ExerciseLogResponse(
        id=exercise_log.user_id,
        username=exercise_log.username,
        count=exercise_log.count,
        log=[LogEntryResponse(**entry.model_dump()) for entry in exercise_log.log],
    )
