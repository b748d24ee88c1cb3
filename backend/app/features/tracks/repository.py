"""
Track point repository.

Data access layer for TrackPointRecord.
"""

from typing import Sequence

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.repository import BaseRepository
from .models import TrackPointRecord
from .points import TrackPoint


class TrackPointRepository(BaseRepository[TrackPointRecord]):
    """Repository for stored track points."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, TrackPointRecord)

    async def replace_for_ascent(
        self,
        ascent_id: str,
        points: Sequence[TrackPoint],
    ) -> int:
        """
        Delete an ascent's points and store the new track in order.

        Args:
            ascent_id: Ascent the track belongs to
            points: Parsed points in track order

        Returns:
            Number of points stored
        """
        await self.db.execute(
            delete(TrackPointRecord).where(TrackPointRecord.ascent_id == ascent_id)
        )
        self.db.add_all([
            TrackPointRecord(
                ascent_id=ascent_id,
                sequence=i,
                latitude=p.latitude,
                longitude=p.longitude,
                elevation=p.elevation,
                timestamp=p.timestamp,
            )
            for i, p in enumerate(points)
        ])
        await self.db.flush()
        return len(points)
