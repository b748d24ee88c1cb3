"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy.

Note: Feature models are imported lazily to avoid circular imports.
Use direct imports from features/ modules when possible.
"""

from app.models.base import Base


# Lazy import functions to avoid circular imports
def _get_ascent_models():
    """Lazy import of Tour/Ascent models."""
    from app.features.ascents.models import Tour, Ascent
    return Tour, Ascent


def _get_track_models():
    """Lazy import of track point model."""
    from app.features.tracks.models import TrackPointRecord
    return TrackPointRecord


def _get_stats_models():
    """Lazy import of stats model."""
    from app.features.stats.models import UserStatsRecord
    return UserStatsRecord


def __getattr__(name):
    if name == "Tour":
        return _get_ascent_models()[0]
    if name == "Ascent":
        return _get_ascent_models()[1]
    if name == "TrackPointRecord":
        return _get_track_models()
    if name == "UserStatsRecord":
        return _get_stats_models()

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Base",
    "Tour",
    "Ascent",
    "TrackPointRecord",
    "UserStatsRecord",
]
