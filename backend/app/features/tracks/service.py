"""
Track upload service.

Parses an uploaded GPX/TCX file, copies its metrics onto the ascent,
replaces the stored track points and resyncs the owner's stats.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.features.ascents.models import Ascent
from app.features.ascents.repository import AscentRepository
from app.features.ascents.service import AscentNotFoundError
from app.features.stats.service import StatsService
from .parser import parse_track
from .points import TrackStats
from .repository import TrackPointRepository

logger = logging.getLogger(__name__)


class TrackUploadService:
    """
    Service for attaching tracks to ascents.

    Usage:
        service = TrackUploadService(db)
        ascent, stats = await service.attach_track(user_id, ascent_id, content, "tour.gpx")
    """

    def __init__(self, db: AsyncSession, stats_service: StatsService | None = None):
        self.db = db
        self.ascents = AscentRepository(db)
        self.points = TrackPointRepository(db)
        self.stats = stats_service or StatsService(db)

    async def attach_track(
        self,
        user_id: str,
        ascent_id: str,
        content: bytes | str,
        filename: str,
    ) -> tuple[Ascent, TrackStats]:
        """
        Parse a track file and store it on an ascent.

        Args:
            user_id: Owner's ID
            ascent_id: Ascent to attach the track to
            content: Raw file content
            filename: Original file name (selects GPX or TCX)

        Returns:
            (updated ascent, parsed track stats)

        Raises:
            AscentNotFoundError: Ascent missing or not owned by the user
            TrackParseError: File is not a usable GPX/TCX track
        """
        ascent = await self.ascents.get_for_user(ascent_id, user_id)
        if ascent is None:
            raise AscentNotFoundError(f"Ascent {ascent_id} not found")

        track = parse_track(content, filename)

        await self.ascents.update(
            ascent,
            distance=track.distance,
            elevation_gain=track.elevation_gain,
            elevation_loss=track.elevation_loss,
            duration=track.duration,
            max_elevation=track.max_elevation,
            min_elevation=track.min_elevation,
        )
        stored = await self.points.replace_for_ascent(ascent.id, track.track_points)
        await self.stats.recompute_for_user(user_id)

        logger.info(
            f"Track {filename!r} attached to ascent {ascent_id}: "
            f"{stored} points ({track.discarded_points} discarded), "
            f"{track.distance} km, +{track.elevation_gain} m"
        )
        return ascent, track
