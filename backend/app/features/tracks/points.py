"""Track data models (dataclasses, no DB dependency)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class TrackPoint:
    """One recorded GPS sample."""

    latitude: float  # degrees
    longitude: float  # degrees
    elevation: float | None = None  # meters
    timestamp: datetime | None = None  # always timezone-aware


@dataclass(frozen=True)
class RawTrackPoint:
    """Unvalidated field texts of a point as found in the file."""

    lat: str | None
    lon: str | None
    elevation: str | None = None
    time: str | None = None


@dataclass
class FilteredPoints:
    """Result of the validate-and-filter pass."""

    points: list[TrackPoint] = field(default_factory=list)
    discarded: int = 0  # points dropped for missing/invalid lat or lon


@dataclass
class TrackStats:
    """Metrics derived from a parsed track."""

    distance: float  # km, 2 decimals
    elevation_gain: int  # m
    elevation_loss: int  # m
    duration: int | None  # minutes, needs >= 2 timestamps
    max_elevation: int | None  # m
    min_elevation: int | None  # m
    track_points: list[TrackPoint] = field(default_factory=list)
    discarded_points: int = 0
