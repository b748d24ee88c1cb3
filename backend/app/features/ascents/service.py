"""
Ascent service.

Create tours, and create, update and delete ascents; every ascent change
resyncs the owner's stats.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.features.stats.service import StatsService
from .models import Ascent, Tour
from .repository import AscentRepository, TourRepository
from .schemas import AscentCreate, AscentUpdate, TourCreate, ascent_duration_minutes

logger = logging.getLogger(__name__)


class AscentNotFoundError(LookupError):
    """Ascent does not exist or belongs to another user."""


class TourNotFoundError(LookupError):
    """Tour does not exist or belongs to another user."""


class InvalidAscentTimesError(ValueError):
    """End time before start time after merging an update with stored times."""


def to_storage_datetime(value: datetime | None) -> datetime | None:
    """Aware datetimes are stored as naive UTC; naive ones are kept as-is."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


_DATETIME_FIELDS = ("date", "start_time", "end_time")


class TourService:
    """
    Service for the user's tour list.

    Usage:
        service = TourService(db)
        tour = await service.create_tour(user_id, TourCreate(...))
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.tours = TourRepository(db)

    async def create_tour(self, user_id: str, data: TourCreate) -> Tour:
        """Store a tour; activity and condition are checked by the model."""
        tour = await self.tours.create(user_id=user_id, **data.model_dump())
        await self.db.commit()

        logger.info(f"Tour {tour.id} ({tour.activity}) created for user {user_id}")
        return tour


class AscentService:
    """
    Service for ascent mutations.

    Usage:
        service = AscentService(db)
        ascent = await service.create_ascent(user_id, AscentCreate(...))
    """

    def __init__(self, db: AsyncSession, stats_service: StatsService | None = None):
        self.db = db
        self.ascents = AscentRepository(db)
        self.tours = TourRepository(db)
        self.stats = stats_service or StatsService(db)

    async def get_ascent(self, user_id: str, ascent_id: str) -> Ascent:
        ascent = await self.ascents.get_for_user(ascent_id, user_id)
        if ascent is None:
            raise AscentNotFoundError(f"Ascent {ascent_id} not found")
        return ascent

    async def create_ascent(self, user_id: str, data: AscentCreate) -> Ascent:
        """
        Record an ascent of one of the user's tours.

        Raises:
            TourNotFoundError: Tour missing or not owned by the user
        """
        tour = await self.tours.get_for_user(data.tour_id, user_id)
        if tour is None:
            raise TourNotFoundError(f"Tour {data.tour_id} not found")

        values = _storage_values(data.model_dump())
        ascent = await self.ascents.create(user_id=user_id, **values)
        await self.stats.recompute_for_user(user_id)

        logger.info(f"Ascent {ascent.id} created for tour {tour.id}")
        return ascent

    async def update_ascent(
        self, user_id: str, ascent_id: str, data: AscentUpdate
    ) -> Ascent:
        """Apply the fields set in the request and resync stats."""
        ascent = await self.get_ascent(user_id, ascent_id)
        values = _storage_values(data.model_dump(exclude_unset=True))
        if values.get("date", ascent.date) is None:
            del values["date"]  # date is mandatory, null means "keep"
        _merge_duration(ascent, values)
        await self.ascents.update(ascent, **values)
        await self.stats.recompute_for_user(user_id)
        return ascent

    async def delete_ascent(self, user_id: str, ascent_id: str) -> None:
        """Delete an ascent with its track and resync stats."""
        ascent = await self.get_ascent(user_id, ascent_id)
        await self.ascents.delete(ascent)
        await self.stats.recompute_for_user(user_id)
        logger.info(f"Ascent {ascent_id} deleted")


def _merge_duration(ascent: Ascent, values: dict) -> None:
    """
    Check start/end order against the stored times and rederive duration
    when an update changes a time but sends no duration.

    Raises:
        InvalidAscentTimesError: Merged end time is before the start time
    """
    if not ({"start_time", "end_time"} & values.keys()):
        return
    start = values.get("start_time", ascent.start_time)
    end = values.get("end_time", ascent.end_time)
    if start is None or end is None:
        return
    if end < start:
        raise InvalidAscentTimesError("endTime must not be before startTime")
    values.setdefault("duration", ascent_duration_minutes(start, end))


def _storage_values(values: dict) -> dict:
    for name in _DATETIME_FIELDS:
        if name in values:
            values[name] = to_storage_datetime(values[name])
    return values
