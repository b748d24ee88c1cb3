"""
Stats service.

Loads a user's ascents, runs the aggregator and stores the result.
Called after every ascent create/update/delete and after track uploads.
"""

import asyncio
import logging
from collections import Counter
from contextlib import asynccontextmanager
from datetime import date, datetime, tzinfo
from typing import Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.features.ascents.repository import AscentRepository
from .aggregator import (
    UserStats,
    recompute_stats,
    summarize_period,
    activity_breakdown,
    month_start,
    year_start,
)
from .repository import UserStatsRepository
from .schemas import (
    GoalsUpdate,
    MonthlySummary,
    RecentAscent,
    StatsOverview,
    UserStatsResponse,
    YearlySummary,
)

logger = logging.getLogger(__name__)

# Recomputation replaces the whole row, so two runs for one user must not
# interleave their read and write. A lock lives only while some run holds
# or waits for it.
_user_locks: dict[str, asyncio.Lock] = {}
_lock_users: Counter[str] = Counter()


@asynccontextmanager
async def _user_lock(user_id: str):
    lock = _user_locks.setdefault(user_id, asyncio.Lock())
    _lock_users[user_id] += 1
    try:
        async with lock:
            yield
    finally:
        _lock_users[user_id] -= 1
        if _lock_users[user_id] == 0:
            del _lock_users[user_id]
            del _user_locks[user_id]


class StatsService:
    """
    Service for user statistics.

    Usage:
        service = StatsService(db)
        stats = await service.recompute_for_user(user_id)
    """

    def __init__(
        self,
        db: AsyncSession,
        tz: Optional[tzinfo] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.db = db
        self.tz = tz or settings.stats_tz
        self._clock = clock
        self.ascents = AscentRepository(db)
        self.stats = UserStatsRepository(db)

    def today(self) -> date:
        """Current calendar day in the stats time zone."""
        now = self._clock() if self._clock else datetime.now(self.tz)
        if now.tzinfo is not None:
            now = now.astimezone(self.tz)
        return now.date()

    async def recompute_for_user(self, user_id: str) -> UserStats:
        """
        Recompute and store a user's stats from the full ascent history.

        Pending changes in the session (e.g. a just-created ascent) are
        included and committed together with the stats row.

        Args:
            user_id: Owner's ID

        Returns:
            The freshly computed UserStats
        """
        async with _user_lock(user_id):
            ascents = await self.ascents.list_for_user(user_id)
            stats = recompute_stats(ascents, today=self.today(), tz=self.tz)
            await self.stats.save_computed(user_id, stats)
            await self.db.commit()

        logger.info(
            f"Stats recomputed for user {user_id}: {stats.total_ascents} ascents, "
            f"streak {stats.current_streak}/{stats.longest_streak} weeks"
        )
        return stats

    async def get_overview(self, user_id: str) -> StatsOverview:
        """
        Build the stats page: stored stats, recent ascents, monthly and
        yearly summaries with goals, and the activity breakdown.

        A missing stats row is created empty, as on first visit.
        """
        record = await self.stats.get_by_user_id(user_id)
        if record is None:
            record = await self.stats.save_goals(user_id)
            await self.db.commit()

        ascents = await self.ascents.list_for_user(user_id)
        today = self.today()
        monthly = summarize_period(ascents, month_start(today), self.tz)
        yearly = summarize_period(ascents, year_start(today), self.tz)

        return StatsOverview(
            stats=UserStatsResponse.model_validate(record),
            recent_ascents=[
                RecentAscent.model_validate(a)
                for a in ascents[:settings.recent_ascents_limit]
            ],
            monthly=MonthlySummary(
                ascents=monthly.ascents,
                elevation_gain=monthly.elevation_gain,
                goal=record.monthly_ascent_goal,
            ),
            yearly=YearlySummary(
                ascents=yearly.ascents,
                elevation_gain=yearly.elevation_gain,
                ascent_goal=record.yearly_ascent_goal,
                elevation_goal=record.yearly_elevation_goal,
            ),
            activity_breakdown=activity_breakdown(ascents),
        )

    async def update_goals(self, user_id: str, goals: GoalsUpdate) -> UserStatsResponse:
        """Set the goals present in the request; others keep their value."""
        record = await self.stats.save_goals(user_id, **goals.model_dump(exclude_unset=True))
        await self.db.commit()
        logger.info(f"Goals updated for user {user_id}")
        return UserStatsResponse.model_validate(record)
