"""
User statistics module.

Usage:
    from app.features.stats import recompute_stats, UserStats
    from app.features.stats.service import StatsService

Components:
- recompute_stats: totals and weekly streaks from an ascent list (pure)
- summarize_period, activity_breakdown: overview figures (pure)
- UserStatsRecord: SQLAlchemy model
- UserStatsRepository: upsert of computed stats and goals
"""

from .aggregator import (
    UserStats,
    PeriodSummary,
    AscentSnapshot,
    recompute_stats,
    compute_streaks,
    week_start,
    week_keys,
    summarize_period,
    activity_breakdown,
)
from .models import UserStatsRecord
from .repository import UserStatsRepository

__all__ = [
    "UserStats",
    "PeriodSummary",
    "AscentSnapshot",
    "recompute_stats",
    "compute_streaks",
    "week_start",
    "week_keys",
    "summarize_period",
    "activity_breakdown",
    "UserStatsRecord",
    "UserStatsRepository",
]
