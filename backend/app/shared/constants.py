"""
Unified constants for tours, ascents and track files.

This module provides a single source of truth for enum naming
across the entire application.
"""

from enum import Enum


class Activity(str, Enum):
    """
    Kind of mountain tour.

    Used in:
    - Tour records
    - Stats activity breakdown
    """
    SPORTKLETTERN = "SPORTKLETTERN"
    ALPINKLETTERN = "ALPINKLETTERN"
    SPORTKLETTERSTEIG = "SPORTKLETTERSTEIG"
    HOCHTOUR = "HOCHTOUR"
    EIS_MIXEDKLETTERN = "EIS_MIXEDKLETTERN"
    WANDERN = "WANDERN"
    BERGTOUR = "BERGTOUR"
    SKITOUR = "SKITOUR"
    SKIHOCHTOUR = "SKIHOCHTOUR"


class Condition(str, Enum):
    """Seasonal conditions a tour is done in."""
    WINTER = "WINTER"
    SOMMER = "SOMMER"
    UEBERGANG = "UEBERGANG"


ACTIVITY_LABELS: dict[Activity, str] = {
    Activity.SPORTKLETTERN: "Sportklettern",
    Activity.ALPINKLETTERN: "Alpinklettern",
    Activity.SPORTKLETTERSTEIG: "Sportklettersteig",
    Activity.HOCHTOUR: "Hochtour",
    Activity.EIS_MIXEDKLETTERN: "Eis/Mixedklettern",
    Activity.WANDERN: "Wandern",
    Activity.BERGTOUR: "Bergtour",
    Activity.SKITOUR: "Skitour",
    Activity.SKIHOCHTOUR: "Skihochtour",
}


# Track upload detection
TRACK_FILE_EXTENSIONS: tuple[str, ...] = (".gpx", ".tcx")

TRACK_CONTENT_TYPES: frozenset[str] = frozenset({
    "application/gpx+xml",
    "application/xml",
    "text/xml",
})


def is_track_file(filename: str | None, content_type: str | None = None) -> bool:
    """
    Check whether an upload looks like a GPX/TCX track.

    Either the extension or the declared content type is enough.
    """
    name = (filename or "").lower()
    if name.endswith(TRACK_FILE_EXTENSIONS):
        return True
    return content_type in TRACK_CONTENT_TYPES
