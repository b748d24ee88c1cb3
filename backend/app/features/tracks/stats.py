"""
Track statistics.

Derives distance, elevation and duration figures from a normalized
point list. Shared by the GPX and TCX readers.
"""

from typing import Sequence

from app.shared.geo import calculate_total_distance
from app.shared.elevation import calculate_elevation_changes, elevation_range
from app.shared.formatters import round_half_up, round_to_int
from .points import TrackPoint, TrackStats


def compute_track_stats(
    points: Sequence[TrackPoint],
    discarded: int = 0
) -> TrackStats:
    """
    Calculate distance, elevation gain/loss, extremes and duration.

    Args:
        points: Validated points in track order
        discarded: Number of points dropped during validation

    Returns:
        TrackStats holding the metrics and the points themselves
    """
    distance_km = calculate_total_distance(
        [(p.latitude, p.longitude) for p in points]
    )

    elevations = [p.elevation for p in points]
    gain, loss = calculate_elevation_changes(elevations)
    max_ele, min_ele = elevation_range(elevations)

    return TrackStats(
        distance=round_half_up(distance_km, 2),
        elevation_gain=round_to_int(gain),
        elevation_loss=round_to_int(loss),
        duration=_duration_minutes(points),
        max_elevation=round_to_int(max_ele) if max_ele is not None else None,
        min_elevation=round_to_int(min_ele) if min_ele is not None else None,
        track_points=list(points),
        discarded_points=discarded,
    )


def _duration_minutes(points: Sequence[TrackPoint]) -> int | None:
    """Minutes between earliest and latest timestamp, None if < 2."""
    timestamps = sorted(p.timestamp for p in points if p.timestamp is not None)
    if len(timestamps) < 2:
        return None
    seconds = (timestamps[-1] - timestamps[0]).total_seconds()
    return round_to_int(seconds / 60)
