"""Statistics service for calorie entries."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.entries import CalorieEntry
from calorie_tracker.domain.stats import (
    ChartPoint,
    ChartPreset,
    Period,
    PeriodStats,
    chart_range,
    compute_stats,
    dense_series,
    period_window,
    window_dates,
)

Clock = Callable[[], datetime]


class StatsRepository(Protocol):
    """Read-only queries used for statistics."""

    def list_all_entries(self, user_id: UUID) -> list[CalorieEntry]:
        """Return every entry for a user, oldest first."""

    def list_entries_between(
        self, user_id: UUID, start: date | None, end: date | None
    ) -> list[CalorieEntry]:
        """Return entries within an inclusive date range, oldest first."""


def utc_now() -> datetime:
    """Return the current UTC time."""
    return datetime.now(tz=UTC)


@dataclass
class ChartSeries:
    """A dense per-day series and the range it covers."""

    start: date
    end: date
    points: list[ChartPoint]


@dataclass
class StatsService:
    """Service for computing user statistics and chart series."""

    repository: StatsRepository
    clock: Clock = field(default=utc_now)

    def get_stats(self, user_id: UUID, period: Period) -> PeriodStats:
        """Return lifetime and period statistics for the user."""
        start, end = period_window(period, self.clock())
        first_day, last_day = window_dates(start, end)
        all_entries = self.repository.list_all_entries(user_id)
        period_entries = self.repository.list_entries_between(
            user_id, first_day, last_day
        )
        return compute_stats(all_entries, period_entries)

    def get_chart(self, user_id: UUID, start: date, end: date) -> ChartSeries:
        """Return a zero-filled daily series between two dates."""
        entries = self.repository.list_entries_between(user_id, start, end)
        return ChartSeries(
            start=start, end=end, points=dense_series(entries, start, end)
        )

    def get_chart_preset(self, user_id: UUID, preset: ChartPreset) -> ChartSeries:
        """Return the daily series for a named range ending today."""
        start, end = chart_range(preset, self.clock().date())
        return self.get_chart(user_id, start, end)
