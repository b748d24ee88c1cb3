"""
Track-related schemas.

Pydantic models for track parsing and upload responses.
"""

from datetime import datetime
from typing import List, Optional

from app.schemas.base import CamelModel
from app.features.ascents.schemas import AscentResponse


class TrackPointSchema(CamelModel):
    """Single point of a parsed track."""

    latitude: float
    longitude: float
    elevation: Optional[float] = None
    timestamp: Optional[datetime] = None


class TrackStatsResponse(CamelModel):
    """Metrics derived from an uploaded GPX/TCX file."""

    distance: float
    elevation_gain: int
    elevation_loss: int
    duration: Optional[int] = None
    max_elevation: Optional[int] = None
    min_elevation: Optional[int] = None
    track_points: List[TrackPointSchema] = []
    discarded_points: int = 0


class TrackUploadResponse(CamelModel):
    """Response for a track attached to an ascent."""

    ascent: AscentResponse
    stats: TrackStatsResponse
