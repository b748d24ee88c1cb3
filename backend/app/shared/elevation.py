"""
Elevation processing utilities.

This is the SINGLE SOURCE OF TRUTH for elevation calculations.
"""
from typing import List, Optional, Sequence, Tuple


def calculate_elevation_changes(
    elevations: Sequence[Optional[float]]
) -> Tuple[float, float]:
    """
    Calculate total elevation gain and loss.

    Samples without a value are skipped, so the chain continues from the
    last sample that had one: [100, None, 150, 120] gives (50, 30).

    Args:
        elevations: Elevation values in track order, None where missing

    Returns:
        Tuple of (gain_m, loss_m)
    """
    known: List[float] = [e for e in elevations if e is not None]
    gain = 0.0
    loss = 0.0

    for i in range(1, len(known)):
        diff = known[i] - known[i - 1]
        if diff > 0:
            gain += diff
        else:
            loss += abs(diff)

    return gain, loss


def elevation_range(
    elevations: Sequence[Optional[float]]
) -> Tuple[Optional[float], Optional[float]]:
    """
    Highest and lowest known elevation.

    Returns:
        (max_m, min_m), both None when no sample has an elevation
    """
    known = [e for e in elevations if e is not None]
    if not known:
        return None, None
    return max(known), min(known)
