"""Calorie entry service."""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.entries import CalorieEntry, EntryPage, Pagination
from calorie_tracker.domain.errors import AccessDeniedError, NotFoundError

DEFAULT_PAGE_LIMIT = 30
MAX_PAGE_LIMIT = 100

logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Persistence interface for calorie entries."""

    def create_entry(
        self, user_id: UUID, entry_date: date, calories: int, notes: str | None
    ) -> CalorieEntry:
        """Create an entry and return it."""

    def get_entry(self, entry_id: UUID) -> CalorieEntry | None:
        """Return an entry by id."""

    def update_entry(self, entry_id: UUID, changes: dict[str, object]) -> CalorieEntry:
        """Apply column changes to an entry and return it."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry."""

    def list_entries(  # noqa: PLR0913
        self,
        user_id: UUID,
        start: date | None,
        end: date | None,
        limit: int,
        offset: int,
    ) -> list[CalorieEntry]:
        """Return a page of entries, newest date first."""

    def count_entries(self, user_id: UUID, start: date | None, end: date | None) -> int:
        """Return the number of entries matching the date filter."""


def ensure_owner(entry: CalorieEntry, user_id: UUID) -> None:
    """Raise AccessDeniedError unless the user owns the entry."""
    if entry.user_id != user_id:
        raise AccessDeniedError("Not authorized to access this entry")


@dataclass
class EntryService:
    """Service for creating, reading and changing a user's entries."""

    repository: EntryRepository

    def create_entry(
        self, user_id: UUID, entry_date: date, calories: int, notes: str | None = None
    ) -> CalorieEntry:
        """Record calories for a day."""
        entry = self.repository.create_entry(
            user_id=user_id,
            entry_date=entry_date,
            calories=calories,
            notes=_clean_notes(notes),
        )
        logger.info(
            "Calorie entry created",
            extra={"user_id": str(user_id), "entry_id": str(entry.id)},
        )
        return entry

    def list_entries(
        self,
        user_id: UUID,
        start: date | None = None,
        end: date | None = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        page: int = 1,
    ) -> EntryPage:
        """Return one page of the user's entries with pagination metadata."""
        entries = self.repository.list_entries(
            user_id, start, end, limit=limit, offset=(page - 1) * limit
        )
        total = self.repository.count_entries(user_id, start, end)
        return EntryPage(
            entries=entries,
            pagination=Pagination(
                total=total,
                page=page,
                limit=limit,
                pages=math.ceil(total / limit),
            ),
        )

    def get_entry(self, user_id: UUID, entry_id: UUID) -> CalorieEntry:
        """Return an entry owned by the user."""
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            raise NotFoundError("Calorie entry not found")
        ensure_owner(entry, user_id)
        return entry

    def update_entry(
        self,
        user_id: UUID,
        entry_id: UUID,
        *,
        entry_date: date | None = None,
        calories: int | None = None,
        notes: str | None = None,
    ) -> CalorieEntry:
        """Change the provided fields of an entry owned by the user."""
        entry = self.get_entry(user_id, entry_id)
        changes: dict[str, object] = {}
        if entry_date is not None:
            changes["date"] = entry_date
        if calories is not None:
            changes["calories"] = calories
        if notes is not None:
            changes["notes"] = _clean_notes(notes)
        if not changes:
            return entry
        updated = self.repository.update_entry(entry_id, changes)
        logger.info(
            "Calorie entry updated",
            extra={"user_id": str(user_id), "entry_id": str(entry_id)},
        )
        return updated

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete an entry owned by the user."""
        self.get_entry(user_id, entry_id)
        self.repository.delete_entry(entry_id)
        logger.info(
            "Calorie entry deleted",
            extra={"user_id": str(user_id), "entry_id": str(entry_id)},
        )


def _clean_notes(notes: str | None) -> str | None:
    if notes is None:
        return None
    return notes.strip()
