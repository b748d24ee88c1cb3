"""
Statistics aggregator.

Pure functions over a user's ascent history: lifetime totals, Monday-based
weekly streaks, period summaries and the activity breakdown. Nothing here
reads the clock or the database; "today" and the time zone are passed in.

Ascents are duck-typed: anything with `date`, `distance`, `elevation_gain`
and `duration` attributes works (ORM rows, AscentSnapshot). Missing
numbers count as zero.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Sequence


@dataclass
class UserStats:
    """Recomputed summary of a user's ascents."""

    total_ascents: int = 0
    total_elevation_gain: float = 0.0
    total_distance: float = 0.0
    total_duration: int = 0  # minutes
    current_streak: int = 0  # weeks
    longest_streak: int = 0  # weeks
    last_ascent_date: date | datetime | None = None


@dataclass
class PeriodSummary:
    """Ascent count and elevation since a given day."""

    ascents: int = 0
    elevation_gain: float = 0.0


@dataclass(frozen=True)
class AscentSnapshot:
    """Plain ascent values, for callers without ORM rows (CLI, tests)."""

    date: date | datetime
    distance: float | None = None
    elevation_gain: float | None = None
    duration: int | None = None
    activity: str | None = None


# =============================================================================
# Week arithmetic
# =============================================================================

def to_local_date(value: date | datetime, tz: tzinfo = timezone.utc) -> date:
    """
    Calendar day of an ascent date in the given zone.

    Naive datetimes are stored as UTC and converted; plain dates are
    already calendar days.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(tz).date()
    return value


def week_start(day: date) -> date:
    """Monday of the week containing `day` (Sunday belongs to the week before)."""
    return day - timedelta(days=day.weekday())


def weeks_between(earlier: date, later: date) -> int:
    """Whole weeks from one week start to another."""
    return (later - earlier).days // 7


def week_keys(ascents: Sequence[Any], tz: tzinfo = timezone.utc) -> list[date]:
    """Distinct week starts that contain at least one ascent, newest first."""
    return sorted(
        {week_start(to_local_date(a.date, tz)) for a in ascents},
        reverse=True,
    )


def compute_streaks(keys: Sequence[date], current_week: date) -> tuple[int, int]:
    """
    Current and longest run of consecutive weeks.

    Args:
        keys: Distinct week starts, newest first
        current_week: Week start of "today"

    Returns:
        (current_streak, longest_streak). The current streak is the most
        recent run, kept alive while its last week is this week or last
        week, and 0 otherwise.
    """
    if not keys:
        return 0, 0

    run = 0
    longest = 0
    most_recent_run = 0
    in_most_recent_run = True
    previous: date | None = None

    for key in keys:
        if previous is not None and weeks_between(key, previous) == 1:
            run += 1
        else:
            if previous is not None:
                in_most_recent_run = False
            run = 1

        if in_most_recent_run:
            most_recent_run = run
        longest = max(longest, run)
        previous = key

    gap = weeks_between(keys[0], current_week)
    current = most_recent_run if gap in (0, 1) else 0

    return current, longest


# =============================================================================
# Aggregation
# =============================================================================

def recompute_stats(
    ascents: Sequence[Any],
    today: date,
    tz: tzinfo = timezone.utc,
) -> UserStats:
    """
    Recompute a user's stats from the full ascent history.

    Args:
        ascents: All ascents of the user, sorted by date descending
        today: Current calendar day in `tz`
        tz: Zone whose Monday-Sunday weeks are counted

    Returns:
        UserStats; all zeros and no last ascent date for an empty history
    """
    if not ascents:
        return UserStats()

    current, longest = compute_streaks(
        week_keys(ascents, tz),
        week_start(today),
    )

    return UserStats(
        total_ascents=len(ascents),
        total_elevation_gain=sum(a.elevation_gain or 0 for a in ascents),
        total_distance=sum(a.distance or 0 for a in ascents),
        total_duration=sum(a.duration or 0 for a in ascents),
        current_streak=current,
        longest_streak=longest,
        last_ascent_date=ascents[0].date,
    )


def summarize_period(
    ascents: Sequence[Any],
    since: date,
    tz: tzinfo = timezone.utc,
) -> PeriodSummary:
    """Count ascents and sum elevation gain on or after `since`."""
    in_period = [a for a in ascents if to_local_date(a.date, tz) >= since]
    return PeriodSummary(
        ascents=len(in_period),
        elevation_gain=sum(a.elevation_gain or 0 for a in in_period),
    )


def activity_breakdown(ascents: Sequence[Any]) -> dict[str, int]:
    """Number of ascents per tour activity; ascents without one are skipped."""
    counts = Counter(
        a.activity for a in ascents
        if getattr(a, "activity", None) is not None
    )
    return dict(counts)


def month_start(today: date) -> date:
    return today.replace(day=1)


def year_start(today: date) -> date:
    return today.replace(month=1, day=1)
