"""Supabase repository for calorie entries."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.domain.entries import CalorieEntry
from calorie_tracker.services.entries import EntryRepository

ENTRY_COLUMNS = "id, user_id, date, calories, notes, created_at, updated_at"


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for calorie entry CRUD."""

    client: Client

    def create_entry(
        self, user_id: UUID, entry_date: date, calories: int, notes: str | None
    ) -> CalorieEntry:
        """Insert an entry row and return it."""
        response = (
            self.client.table("calorie_entries")
            .insert(
                {
                    "user_id": str(user_id),
                    "date": entry_date.isoformat(),
                    "calories": calories,
                    "notes": notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create calorie entry")
        return parse_entry_row(response.data[0])

    def get_entry(self, entry_id: UUID) -> CalorieEntry | None:
        """Return an entry row by id."""
        response = (
            self.client.table("calorie_entries")
            .select(ENTRY_COLUMNS)
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_entry_row(response.data[0])

    def update_entry(self, entry_id: UUID, changes: dict[str, object]) -> CalorieEntry:
        """Update entry columns and return the new row."""
        payload = {
            key: value.isoformat() if isinstance(value, date) else value
            for key, value in changes.items()
        }
        payload["updated_at"] = datetime.now(tz=UTC).isoformat()
        response = (
            self.client.table("calorie_entries")
            .update(payload)
            .eq("id", str(entry_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update calorie entry")
        return parse_entry_row(response.data[0])

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry row."""
        self.client.table("calorie_entries").delete().eq("id", str(entry_id)).execute()

    def list_entries(  # noqa: PLR0913
        self,
        user_id: UUID,
        start: date | None,
        end: date | None,
        limit: int,
        offset: int,
    ) -> list[CalorieEntry]:
        """Return a page of entries ordered by date descending."""
        query = (
            self.client.table("calorie_entries")
            .select(ENTRY_COLUMNS)
            .eq("user_id", str(user_id))
        )
        if start is not None:
            query = query.gte("date", start.isoformat())
        if end is not None:
            query = query.lte("date", end.isoformat())
        response = (
            query.order("date", desc=True).range(offset, offset + limit - 1).execute()
        )
        return [parse_entry_row(row) for row in response.data or []]

    def count_entries(self, user_id: UUID, start: date | None, end: date | None) -> int:
        """Return the number of entries matching the filter."""
        query = (
            self.client.table("calorie_entries")
            .select("id", count="exact")
            .eq("user_id", str(user_id))
        )
        if start is not None:
            query = query.gte("date", start.isoformat())
        if end is not None:
            query = query.lte("date", end.isoformat())
        response = query.execute()
        return response.count or 0


def parse_entry_row(row: dict[str, object]) -> CalorieEntry:
    """Build a CalorieEntry from a calorie_entries row."""
    return CalorieEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["date"])[:10]),
        calories=int(row.get("calories") or 0),
        notes=row.get("notes"),
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )


def _parse_timestamp(value: object) -> datetime | None:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None
