"""Supabase repository for calorie statistics."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.supabase_entry_repository import (
    ENTRY_COLUMNS,
    parse_entry_row,
)
from calorie_tracker.domain.entries import CalorieEntry
from calorie_tracker.services.stats import StatsRepository


@dataclass
class SupabaseStatsRepository(StatsRepository):
    """Supabase implementation for stats queries."""

    client: Client

    def list_all_entries(self, user_id: UUID) -> list[CalorieEntry]:
        """Return the user's full entry history."""
        response = (
            self.client.table("calorie_entries")
            .select(ENTRY_COLUMNS)
            .eq("user_id", str(user_id))
            .order("date", desc=False)
            .execute()
        )
        return [parse_entry_row(row) for row in response.data or []]

    def list_entries_between(
        self, user_id: UUID, start: date | None, end: date | None
    ) -> list[CalorieEntry]:
        """Return entries in the inclusive date range."""
        query = (
            self.client.table("calorie_entries")
            .select(ENTRY_COLUMNS)
            .eq("user_id", str(user_id))
        )
        if start is not None:
            query = query.gte("date", start.isoformat())
        if end is not None:
            query = query.lte("date", end.isoformat())
        response = query.order("date", desc=False).execute()
        return [parse_entry_row(row) for row in response.data or []]
