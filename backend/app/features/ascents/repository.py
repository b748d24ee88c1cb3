"""
Ascent repositories.

Data access layer for Tour and Ascent models.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.shared.repository import BaseRepository
from .models import Tour, Ascent


class TourRepository(BaseRepository[Tour]):
    """Repository for Tour operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Tour)

    async def get_for_user(self, tour_id: str, user_id: str) -> Tour | None:
        """Tour by ID, only if it belongs to the user."""
        return await self.get_by(id=tour_id, user_id=user_id)


class AscentRepository(BaseRepository[Ascent]):
    """Repository for Ascent operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Ascent)

    async def get_for_user(self, ascent_id: str, user_id: str) -> Ascent | None:
        """
        Get ascent owned by a user.

        Args:
            ascent_id: Ascent ID
            user_id: Owner's ID

        Returns:
            Ascent with its tour loaded, None if not found or not owned
        """
        result = await self.db.execute(
            select(Ascent)
            .options(selectinload(Ascent.tour))
            .where(Ascent.id == ascent_id, Ascent.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: str) -> list[Ascent]:
        """
        Full ascent history of a user, newest first.

        The stats aggregator depends on this order.

        Args:
            user_id: Owner's ID

        Returns:
            Ascents sorted by date descending, tours eagerly loaded
        """
        result = await self.db.execute(
            select(Ascent)
            .options(selectinload(Ascent.tour))
            .where(Ascent.user_id == user_id)
            .order_by(Ascent.date.desc(), Ascent.created_at.desc())
        )
        return list(result.scalars().all())
