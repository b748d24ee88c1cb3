"""
Track file parser.

Reads GPX and TCX files into a normalized point list and hands it to
compute_track_stats(). Per-point problems never abort a parse: a point
without usable coordinates is dropped (and counted), an unreadable
elevation or time is simply left out.
"""

import logging
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Iterable, Iterator, List, Optional

from app.shared.geo import is_valid_coordinate
from .errors import TrackParseError, TrackFormatError, EmptyTrackError
from .points import TrackPoint, RawTrackPoint, FilteredPoints, TrackStats
from .stats import compute_track_stats

logger = logging.getLogger(__name__)

Content = bytes | str


def parse_track(content: Content, filename: str) -> TrackStats:
    """
    Parse a GPX or TCX file, choosing the reader by file extension.

    Unknown extensions are tried as GPX first and then as TCX; when both
    fail the TCX error is raised.

    Args:
        content: Raw file content
        filename: Original file name, used only for format detection

    Returns:
        TrackStats for the file

    Raises:
        TrackFormatError: Malformed XML or wrong root element
        EmptyTrackError: No point with valid coordinates
    """
    name = (filename or "").lower()

    if name.endswith(".gpx"):
        return parse_gpx(content)
    if name.endswith(".tcx"):
        return parse_tcx(content)

    try:
        return parse_gpx(content)
    except TrackParseError as e:
        logger.debug(f"{filename!r} is not readable as GPX ({e}), trying TCX")
        return parse_tcx(content)


def parse_gpx(content: Content) -> TrackStats:
    """Parse GPX content (gpx > trk > trkseg > trkpt)."""
    root = _load_root(content, "gpx", "GPX")
    filtered = validate_points(_gpx_raw_points(root))

    if not filtered.points:
        raise EmptyTrackError("No valid track points found in GPX file")

    return compute_track_stats(filtered.points, filtered.discarded)


def parse_tcx(content: Content) -> TrackStats:
    """Parse TCX content (Activities > Activity > Lap > Track > Trackpoint)."""
    root = _load_root(content, "TrainingCenterDatabase", "TCX")
    filtered = validate_points(_tcx_raw_points(root))

    if not filtered.points:
        raise EmptyTrackError("No valid track points found in TCX file")

    return compute_track_stats(filtered.points, filtered.discarded)


def validate_points(raw_points: Iterable[RawTrackPoint]) -> FilteredPoints:
    """
    Convert raw field texts to TrackPoints.

    Points whose latitude or longitude is missing or not a finite
    number are discarded. Elevation and time are optional per point.

    Args:
        raw_points: Candidates in file order

    Returns:
        FilteredPoints with the kept points and the discard count
    """
    result = FilteredPoints()

    for raw in raw_points:
        lat = parse_finite_float(raw.lat)
        lon = parse_finite_float(raw.lon)
        if lat is None or lon is None:
            result.discarded += 1
            continue

        result.points.append(TrackPoint(
            latitude=lat,
            longitude=lon,
            elevation=parse_finite_float(raw.elevation),
            timestamp=parse_timestamp(raw.time),
        ))

    return result


def parse_finite_float(text: Optional[str]) -> Optional[float]:
    """float(text), or None for missing, malformed, NaN or infinite input."""
    if text is None:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if is_valid_coordinate(value) else None


def parse_timestamp(text: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp.

    A trailing 'Z' is accepted; values without an offset are taken as UTC.
    """
    if not text:
        return None
    text = text.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        value = datetime.fromisoformat(text)
    except ValueError:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


# =============================================================================
# XML helpers
# =============================================================================

def _load_root(content: Content, root_name: str, label: str) -> ET.Element:
    """Parse XML and check the root element name (namespace ignored)."""
    if isinstance(content, str):
        content = content.lstrip("\ufeff \t\r\n")  # BOM / leading blank lines
    else:
        content = content.lstrip()

    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise TrackFormatError(f"Invalid {label} file: {e}") from e

    if _local_name(root.tag) != root_name:
        raise TrackFormatError(
            f"Invalid {label} file: missing {root_name} element"
        )
    return root


def _local_name(tag: str) -> str:
    """'{http://www.topografix.com/GPX/1/1}trkpt' -> 'trkpt'"""
    return tag.rsplit("}", 1)[-1]


def _children(parent: Optional[ET.Element], name: str) -> List[ET.Element]:
    """
    Coerce-to-list: direct children called `name`, in document order.

    One element and many elements come back the same way, and a missing
    parent yields an empty list, so every nesting level iterates alike.
    """
    if parent is None:
        return []
    return [child for child in parent if _local_name(child.tag) == name]


def _child(parent: Optional[ET.Element], name: str) -> Optional[ET.Element]:
    found = _children(parent, name)
    return found[0] if found else None


def _child_text(parent: Optional[ET.Element], name: str) -> Optional[str]:
    element = _child(parent, name)
    if element is None or element.text is None:
        return None
    return element.text.strip()


def _gpx_raw_points(root: ET.Element) -> Iterator[RawTrackPoint]:
    for track in _children(root, "trk"):
        for segment in _children(track, "trkseg"):
            for point in _children(segment, "trkpt"):
                yield RawTrackPoint(
                    lat=point.get("lat"),
                    lon=point.get("lon"),
                    elevation=_child_text(point, "ele"),
                    time=_child_text(point, "time"),
                )


def _tcx_raw_points(root: ET.Element) -> Iterator[RawTrackPoint]:
    for activities in _children(root, "Activities"):
        for activity in _children(activities, "Activity"):
            for lap in _children(activity, "Lap"):
                for track in _children(lap, "Track"):
                    for point in _children(track, "Trackpoint"):
                        position = _child(point, "Position")
                        yield RawTrackPoint(
                            lat=_child_text(position, "LatitudeDegrees"),
                            lon=_child_text(position, "LongitudeDegrees"),
                            elevation=_child_text(point, "AltitudeMeters"),
                            time=_child_text(point, "Time"),
                        )
