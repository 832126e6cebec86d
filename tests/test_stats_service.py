"""Tests for stats service."""

from datetime import UTC, date, datetime
from uuid import uuid4

from calorie_tracker.domain.stats import ChartPreset, Period
from calorie_tracker.services.stats import StatsService
from tests.conftest import FIXED_NOW, InMemoryEntryRepository


def test_get_stats_day_only_counts_today() -> None:
    user_id = uuid4()
    repo = InMemoryEntryRepository()
    repo.add(user_id, date(2024, 3, 15), 1800)
    repo.add(user_id, date(2024, 3, 14), 2200)

    service = StatsService(repo, clock=lambda: FIXED_NOW)
    stats = service.get_stats(user_id, Period.DAY)

    assert stats.period_total == 1800
    assert stats.total_entries == 2
    assert stats.daily_average == 2000
    assert stats.highest_day is not None
    assert stats.highest_day.date == date(2024, 3, 15)


def test_get_stats_week_excludes_older_and_future_entries() -> None:
    user_id = uuid4()
    repo = InMemoryEntryRepository()
    repo.add(user_id, date(2024, 3, 8), 5000)
    repo.add(user_id, date(2024, 3, 9), 1000)
    repo.add(user_id, date(2024, 3, 12), 2000)
    repo.add(user_id, date(2024, 3, 16), 9000)

    service = StatsService(repo, clock=lambda: FIXED_NOW)
    stats = service.get_stats(user_id, Period.WEEK)

    assert stats.period_total == 3000
    assert stats.period_average == 1500
    assert stats.total_entries == 4


def test_get_stats_ignores_other_users() -> None:
    user_id = uuid4()
    repo = InMemoryEntryRepository()
    repo.add(uuid4(), date(2024, 3, 15), 2500)

    service = StatsService(repo, clock=lambda: FIXED_NOW)
    stats = service.get_stats(user_id, Period.YEAR)

    assert stats.period_total == 0
    assert stats.highest_day is None


def test_get_chart_zero_fills_range() -> None:
    user_id = uuid4()
    repo = InMemoryEntryRepository()
    repo.add(user_id, date(2024, 1, 1), 500)
    repo.add(user_id, date(2024, 1, 1), 300)
    repo.add(user_id, date(2024, 1, 3), 800)

    service = StatsService(repo)
    series = service.get_chart(user_id, date(2024, 1, 1), date(2024, 1, 3))

    assert [(point.date, point.calories) for point in series.points] == [
        ("2024-01-01", 800),
        ("2024-01-02", 0),
        ("2024-01-03", 800),
    ]


def test_get_chart_preset_uses_clock_date() -> None:
    user_id = uuid4()
    repo = InMemoryEntryRepository()
    service = StatsService(
        repo, clock=lambda: datetime(2024, 3, 15, 9, 30, tzinfo=UTC)
    )

    series = service.get_chart_preset(user_id, ChartPreset.LAST_MONTH)

    assert series.start == date(2024, 2, 1)
    assert series.end == date(2024, 2, 29)
    assert len(series.points) == 29
