"""Calorie statistics and date-range aggregation.

Everything here is a pure function over entries that were already fetched
from storage. Callers supply "now" so the window maths stays testable.
"""

from calendar import monthrange
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import StrEnum

from calorie_tracker.domain.entries import CalorieEntry

MONTHS_PER_YEAR = 12
WEEK_DAYS = 7


class Period(StrEnum):
    """Aggregation window for statistics, relative to now."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def parse(cls, value: str | None) -> "Period":
        """Return the matching period, falling back to a week."""
        try:
            return cls(value)
        except ValueError:
            return cls.WEEK


class ChartPreset(StrEnum):
    """Named chart ranges offered to clients."""

    WEEK = "week"
    MONTH = "month"
    LAST_MONTH = "lastMonth"

    @classmethod
    def parse(cls, value: str | None) -> "ChartPreset":
        """Return the matching preset, falling back to the last seven days."""
        try:
            return cls(value)
        except ValueError:
            return cls.WEEK


@dataclass(frozen=True)
class DayExtreme:
    """A single entry's date and calories."""

    date: date
    calories: int


@dataclass(frozen=True)
class PeriodStats:
    """Lifetime and period statistics for a user."""

    daily_average: float = 0.0
    total_entries: int = 0
    period_total: int = 0
    period_average: float = 0.0
    highest_day: DayExtreme | None = None
    lowest_day: DayExtreme | None = None


@dataclass(frozen=True)
class ChartPoint:
    """One day of a dense chart series."""

    date: str
    calories: int
    display_date: str


def compute_stats(
    all_entries: Iterable[CalorieEntry], period_entries: Iterable[CalorieEntry]
) -> PeriodStats:
    """Compute lifetime and period statistics.

    An empty period yields the zero-valued result. Ties for the highest and
    lowest day go to the earliest date; entries sharing that date keep their
    input order.
    """
    history = list(all_entries)
    period = sorted(period_entries, key=lambda entry: entry.date)
    if not period:
        return PeriodStats()

    history_total = sum(entry.calories for entry in history)
    daily_average = history_total / len(history) if history else 0.0
    period_total = sum(entry.calories for entry in period)

    highest = lowest = period[0]
    for entry in period[1:]:
        if entry.calories > highest.calories:
            highest = entry
        if entry.calories < lowest.calories:
            lowest = entry

    return PeriodStats(
        daily_average=daily_average,
        total_entries=len(history),
        period_total=period_total,
        period_average=period_total / len(period),
        highest_day=DayExtreme(date=highest.date, calories=highest.calories),
        lowest_day=DayExtreme(date=lowest.date, calories=lowest.calories),
    )


def period_window(period: Period, now: datetime) -> tuple[datetime, datetime]:
    """Return the (start, end) window for a period ending at now."""
    if period is Period.DAY:
        start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    elif period is Period.MONTH:
        start = _shift_months(now, 1)
    elif period is Period.YEAR:
        start = _shift_months(now, MONTHS_PER_YEAR)
    else:
        start = now - timedelta(days=WEEK_DAYS)
    return start, now


def window_dates(start: datetime, end: datetime) -> tuple[date, date]:
    """Return the inclusive calendar dates whose midnight falls in the window."""
    first = start.date()
    if start.time() != time.min:
        first += timedelta(days=1)
    return first, end.date()


def dates_between(start: date, end: date) -> list[str]:
    """Return every date from start to end inclusive as YYYY-MM-DD."""
    days = (end - start).days
    return [(start + timedelta(days=offset)).isoformat() for offset in range(days + 1)]


def dense_series(
    entries: Iterable[CalorieEntry], start: date, end: date
) -> list[ChartPoint]:
    """Sum calories per day and zero-fill every day in the range."""
    totals: dict[str, int] = defaultdict(int)
    for entry in entries:
        totals[entry.date.isoformat()] += entry.calories
    return [
        ChartPoint(
            date=day,
            calories=totals.get(day, 0),
            display_date=format_readable_date(date.fromisoformat(day)),
        )
        for day in dates_between(start, end)
    ]


def chart_range(preset: ChartPreset, today: date) -> tuple[date, date]:
    """Resolve a chart preset to an inclusive date range."""
    if preset is ChartPreset.MONTH:
        return today.replace(day=1), today
    if preset is ChartPreset.LAST_MONTH:
        last_day = today.replace(day=1) - timedelta(days=1)
        return last_day.replace(day=1), last_day
    return today - timedelta(days=WEEK_DAYS - 1), today


def format_readable_date(day: date) -> str:
    """Format a date like "January 1, 2024"."""
    return f"{day:%B} {day.day}, {day.year}"


def _shift_months(moment: datetime, months: int) -> datetime:
    index = moment.year * MONTHS_PER_YEAR + moment.month - 1 - months
    year, month_index = divmod(index, MONTHS_PER_YEAR)
    month = month_index + 1
    day = min(moment.day, monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)
