"""
GPS track module.

Usage:
    from app.features.tracks import parse_track, TrackStats, TrackParseError
    from app.features.tracks.service import TrackUploadService

Components:
- parse_track / parse_gpx / parse_tcx: read GPX/TCX into TrackStats
- compute_track_stats: distance, elevation and duration of a point list
- TrackPointRecord: SQLAlchemy model for stored points
- TrackPointRepository: replace an ascent's stored track
- TrackStatsResponse: Pydantic schema for parse results
"""

from .errors import TrackParseError, TrackFormatError, EmptyTrackError
from .points import TrackPoint, TrackStats, FilteredPoints
from .parser import parse_track, parse_gpx, parse_tcx, validate_points
from .stats import compute_track_stats
from .models import TrackPointRecord
from .repository import TrackPointRepository

__all__ = [
    # Errors
    "TrackParseError",
    "TrackFormatError",
    "EmptyTrackError",
    # Data
    "TrackPoint",
    "TrackStats",
    "FilteredPoints",
    # Parsing
    "parse_track",
    "parse_gpx",
    "parse_tcx",
    "validate_points",
    "compute_track_stats",
    # Persistence
    "TrackPointRecord",
    "TrackPointRepository",
]
