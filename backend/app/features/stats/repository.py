"""
Stats repository.

Data access layer for UserStatsRecord.
"""

from dataclasses import asdict

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.repository import BaseRepository
from .aggregator import UserStats
from .models import UserStatsRecord


class UserStatsRepository(BaseRepository[UserStatsRecord]):
    """Repository for per-user stats rows."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, UserStatsRecord)

    async def get_by_user_id(self, user_id: str) -> UserStatsRecord | None:
        return await self.get_by(user_id=user_id)

    async def save_computed(self, user_id: str, stats: UserStats) -> UserStatsRecord:
        """
        Upsert recomputed stats.

        Every computed field is overwritten (nothing is merged with the old
        row); goals are left as they are.

        Args:
            user_id: Owner's ID
            stats: Result of recompute_stats()

        Returns:
            Created or updated row
        """
        return await self.upsert_by({"user_id": user_id}, **asdict(stats))

    async def save_goals(self, user_id: str, **goals) -> UserStatsRecord:
        """Upsert goal fields; a new row starts with zeroed stats."""
        return await self.upsert_by({"user_id": user_id}, **goals)
