"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
Routers translate them into HTTP responses; nothing here knows about HTTP.
"""


class ExerciseTrackerError(Exception):
    """Base class for all application errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UserValidationError(ExerciseTrackerError):
    """Raised when a request is missing a required field.

    Always raised before any store mutation.
    """

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class UserNotFoundError(ExerciseTrackerError):
    """Raised when no user exists for an identifier, malformed ones included."""

    def __init__(self, user_id: str):
        super().__init__("User not found")
        self.user_id = user_id


class StoreFailureError(ExerciseTrackerError):
    """Error raised when a persistence operation fails.

    The underlying client exception is chained as ``__cause__`` and
    logged by the adapter; callers only ever see a generic message.
    """

    pass
