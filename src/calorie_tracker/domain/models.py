"""Domain models for the calorie tracker."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

DEFAULT_CALORIE_GOAL = 2000


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    username: str
    email: str
    calorie_goal: int = DEFAULT_CALORIE_GOAL
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class UserCredentials:
    """A user together with its stored password hash."""

    user: UserRecord
    password_hash: str
