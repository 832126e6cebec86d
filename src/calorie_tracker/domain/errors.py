"""Domain errors raised by services and mapped to HTTP responses."""


class CalorieTrackerError(Exception):
    """Base class for expected, user-facing failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CalorieTrackerError):
    """The requested record does not exist."""


class AccessDeniedError(CalorieTrackerError):
    """The requester does not own the record."""


class ConflictError(CalorieTrackerError):
    """A unique field is already taken."""


class InvalidCredentialsError(CalorieTrackerError):
    """Email or password did not match."""


class InvalidTokenError(CalorieTrackerError):
    """A bearer token could not be verified."""
