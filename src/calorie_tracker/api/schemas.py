"""Pydantic request and response models for the REST API.

Field names are snake_case in Python and camelCase on the wire.
"""

import datetime as dt
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 6
# bcrypt only uses the first 72 bytes.
PASSWORD_MAX_LENGTH = 72


class ApiModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class RegisterRequest(ApiModel):
    """Registration payload."""

    username: str = Field(min_length=USERNAME_MIN_LENGTH)
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )


class LoginRequest(ApiModel):
    """Login payload."""

    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=1, max_length=PASSWORD_MAX_LENGTH)


class UserUpdateRequest(ApiModel):
    """Partial profile update."""

    username: str | None = Field(default=None, min_length=USERNAME_MIN_LENGTH)
    email: str | None = Field(default=None, pattern=EMAIL_PATTERN)
    password: str | None = Field(
        default=None,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
    )
    calorie_goal: int | None = Field(default=None, ge=0)


class UserResponse(ApiModel):
    """Public view of a user."""

    id: UUID
    username: str
    email: str
    calorie_goal: int
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


class AuthResponse(ApiModel):
    """Token plus the authenticated user."""

    token: str
    user: UserResponse


class EntryCreateRequest(ApiModel):
    """New calorie entry."""

    date: dt.date
    calories: int = Field(ge=0)
    notes: str | None = None


class EntryUpdateRequest(ApiModel):
    """Partial calorie entry update."""

    date: dt.date | None = None
    calories: int | None = Field(default=None, ge=0)
    notes: str | None = None


class EntryResponse(ApiModel):
    """A calorie entry."""

    id: UUID
    date: dt.date
    calories: int
    notes: str | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


class PaginationResponse(ApiModel):
    """Pagination metadata."""

    total: int
    page: int
    limit: int
    pages: int


class EntryListResponse(ApiModel):
    """A page of entries."""

    entries: list[EntryResponse]
    pagination: PaginationResponse


class DayExtremeResponse(ApiModel):
    """Date and calories of a single entry."""

    date: dt.date
    calories: int


class StatsResponse(ApiModel):
    """Calorie statistics for a period."""

    daily_average: float
    total_entries: int
    period_total: int
    period_average: float
    highest_day: DayExtremeResponse | None = None
    lowest_day: DayExtremeResponse | None = None


class ChartPointResponse(ApiModel):
    """One day of the chart series."""

    date: str
    calories: int
    display_date: str


class ChartResponse(ApiModel):
    """Dense per-day series for a chart."""

    start_date: dt.date
    end_date: dt.date
    points: list[ChartPointResponse]
