"""
Rounding and formatting utilities.

Used by track statistics, the stats overview and the CLI.
"""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round halves away from negative infinity (2.5 -> 3, -2.5 -> -2).

    Python's built-in round() uses banker's rounding; stored metrics
    must not flip between 2 and 3 depending on parity.

    Args:
        value: Number to round
        ndigits: Decimal places to keep

    Returns:
        Rounded value
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_to_int(value: float) -> int:
    """Half-up rounding to the nearest whole number."""
    return int(math.floor(value + 0.5))


def format_duration_minutes(minutes: int | None) -> str:
    """
    Format minutes as 'Xh Ymin'.

    Args:
        minutes: Duration in minutes (e.g., 150)

    Returns:
        Formatted string (e.g., '2h 30min')
    """
    if minutes is None or minutes < 0:
        return "—"

    h, m = divmod(minutes, 60)

    if h == 0:
        return f"{m}min"
    elif m == 0:
        return f"{h}h"
    else:
        return f"{h}h {m}min"


def format_distance_km(km: float) -> str:
    """
    Format distance.

    Args:
        km: Distance in kilometers

    Returns:
        Formatted string (e.g., '12.5 km' or '850 m')
    """
    if km < 1:
        return f"{int(km * 1000)} m"
    return f"{km:.1f} km"


def format_elevation(meters: float | None) -> str:
    """Format an elevation or elevation change (e.g., '850 m')."""
    if meters is None:
        return "—"
    return f"{int(meters)} m"
