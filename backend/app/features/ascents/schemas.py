"""
Ascent schemas.

Pydantic models for tour and ascent requests and responses.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from app.schemas.base import CamelModel
from app.shared.constants import Activity, Condition
from app.shared.formatters import round_to_int


def ascent_duration_minutes(
    start_time: Optional[datetime],
    end_time: Optional[datetime],
) -> Optional[int]:
    """
    Duration of an ascent from user-entered wall-clock times.

    Always minutes, the unit track durations and stats totals use.

    Returns:
        Rounded minutes, or None when either time is missing
    """
    if start_time is None or end_time is None:
        return None
    return round_to_int((end_time - start_time).total_seconds() / 60)


class TourCreate(CamelModel):
    """Request to add a tour to the user's list."""

    name: str = Field(min_length=1, max_length=255)
    activity: Activity
    condition: Optional[Condition] = None
    elevation: Optional[float] = Field(default=None, ge=0)
    distance: Optional[float] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, ge=0, description="Minutes")


class TourResponse(CamelModel):
    """Stored tour."""

    id: str
    user_id: str
    name: str
    activity: str
    condition: Optional[str] = None
    elevation: Optional[float] = None
    distance: Optional[float] = None
    duration: Optional[int] = None


class _AscentFields(CamelModel):
    notes: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    distance: Optional[float] = Field(default=None, ge=0)
    elevation_gain: Optional[float] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, ge=0, description="Minutes")

    @model_validator(mode="after")
    def fill_duration(self):
        """Check start/end order and derive duration when not given."""
        if self.start_time and self.end_time:
            if self.end_time < self.start_time:
                raise ValueError("endTime must not be before startTime")
            if self.duration is None:
                self.duration = ascent_duration_minutes(self.start_time, self.end_time)
        return self


class AscentCreate(_AscentFields):
    """Request to record an ascent of a tour."""

    tour_id: str
    date: datetime


class AscentUpdate(_AscentFields):
    """Partial update; unset fields are left untouched."""

    date: Optional[datetime] = None


class AscentResponse(CamelModel):
    """Stored ascent."""

    id: str
    user_id: str
    tour_id: str
    date: datetime
    notes: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    distance: Optional[float] = None
    elevation_gain: Optional[float] = None
    elevation_loss: Optional[float] = None
    duration: Optional[int] = None
    max_elevation: Optional[float] = None
    min_elevation: Optional[float] = None
