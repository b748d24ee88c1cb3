"""
Shared utilities (NOT business logic).

Usage:
    from app.shared import haversine, calculate_elevation_changes
    from app.shared.formatters import format_duration_minutes
"""
from .geo import (
    haversine,
    is_valid_coordinate,
    calculate_total_distance,
    EARTH_RADIUS_KM,
)
from .elevation import (
    calculate_elevation_changes,
    elevation_range,
)
from .formatters import (
    round_half_up,
    round_to_int,
    format_duration_minutes,
    format_distance_km,
    format_elevation,
)
from .constants import (
    Activity,
    Condition,
    ACTIVITY_LABELS,
    TRACK_FILE_EXTENSIONS,
    is_track_file,
)
from .repository import BaseRepository

__all__ = [
    # geo
    "haversine",
    "is_valid_coordinate",
    "calculate_total_distance",
    "EARTH_RADIUS_KM",
    # elevation
    "calculate_elevation_changes",
    "elevation_range",
    # formatters
    "round_half_up",
    "round_to_int",
    "format_duration_minutes",
    "format_distance_km",
    "format_elevation",
    # constants
    "Activity",
    "Condition",
    "ACTIVITY_LABELS",
    "TRACK_FILE_EXTENSIONS",
    "is_track_file",
    # repository
    "BaseRepository",
]
