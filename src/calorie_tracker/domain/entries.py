"""Domain models for calorie entries."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class CalorieEntry:
    """One day's recorded calories for a user."""

    id: UUID
    user_id: UUID
    date: date
    calories: int
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Pagination:
    """Pagination metadata for entry listings."""

    total: int
    page: int
    limit: int
    pages: int


@dataclass(frozen=True)
class EntryPage:
    """A page of entries, newest first."""

    entries: list[CalorieEntry]
    pagination: Pagination
