"""
Tests for the GPX/TCX track parser.

Covers format dispatch, point filtering and the derived statistics.
"""

from datetime import datetime, timezone

import pytest

from app.features.tracks import (
    parse_track,
    parse_gpx,
    parse_tcx,
    validate_points,
    TrackParseError,
    TrackFormatError,
    EmptyTrackError,
)
from app.features.tracks.points import RawTrackPoint
from app.features.tracks.parser import parse_finite_float, parse_timestamp
from app.shared.geo import is_valid_coordinate


# =============================================================================
# Test Data
# =============================================================================

def make_gpx(*segments: str, namespace: bool = True) -> str:
    """Build a GPX document with one track holding the given segments."""
    xmlns = ' xmlns="http://www.topografix.com/GPX/1/1"' if namespace else ""
    body = "".join(f"<trkseg>{s}</trkseg>" for s in segments)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<gpx version="1.1" creator="tests"{xmlns}>'
        f"<trk><name>Test</name>{body}</trk>"
        "</gpx>"
    )


def trkpt(lat, lon, ele=None, time=None) -> str:
    attrs = ""
    if lat is not None:
        attrs += f' lat="{lat}"'
    if lon is not None:
        attrs += f' lon="{lon}"'
    children = ""
    if ele is not None:
        children += f"<ele>{ele}</ele>"
    if time is not None:
        children += f"<time>{time}</time>"
    return f"<trkpt{attrs}>{children}</trkpt>"


def make_tcx(*trackpoints: str) -> str:
    points = "".join(trackpoints)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<TrainingCenterDatabase '
        'xmlns="http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2">'
        '<Activities><Activity Sport="Other"><Id>2026-10-17T08:00:00Z</Id>'
        f'<Lap StartTime="2026-10-17T08:00:00Z"><Track>{points}</Track></Lap>'
        "</Activity></Activities>"
        "</TrainingCenterDatabase>"
    )


def tcx_point(lat=None, lon=None, alt=None, time=None) -> str:
    parts = ""
    if time is not None:
        parts += f"<Time>{time}</Time>"
    if lat is not None or lon is not None:
        parts += "<Position>"
        if lat is not None:
            parts += f"<LatitudeDegrees>{lat}</LatitudeDegrees>"
        if lon is not None:
            parts += f"<LongitudeDegrees>{lon}</LongitudeDegrees>"
        parts += "</Position>"
    if alt is not None:
        parts += f"<AltitudeMeters>{alt}</AltitudeMeters>"
    return f"<Trackpoint>{parts}</Trackpoint>"


CLIMB_GPX = make_gpx(
    trkpt(47.0, 11.0, 1000, "2026-10-17T08:00:00Z")
    + trkpt(47.001, 11.0, 1100, "2026-10-17T08:30:00Z")
    + trkpt(47.002, 11.0, 1050, "2026-10-17T09:15:30Z")
)


# =============================================================================
# Test GPX
# =============================================================================

class TestParseGpx:
    """Tests for GPX reading."""

    def test_basic_track(self):
        stats = parse_gpx(CLIMB_GPX)

        assert len(stats.track_points) == 3
        assert stats.elevation_gain == 100
        assert stats.elevation_loss == 50
        assert stats.max_elevation == 1100
        assert stats.min_elevation == 1000
        assert stats.duration == 76  # 75.5 minutes rounds up
        assert stats.distance == pytest.approx(0.22, abs=0.01)
        assert stats.discarded_points == 0

    def test_point_fields(self):
        first = parse_gpx(CLIMB_GPX).track_points[0]
        assert first.latitude == 47.0
        assert first.longitude == 11.0
        assert first.elevation == 1000.0
        assert first.timestamp == datetime(2026, 10, 17, 8, 0, tzinfo=timezone.utc)

    def test_without_namespace(self):
        content = make_gpx(trkpt(47.0, 11.0), trkpt(47.001, 11.0), namespace=False)
        assert len(parse_gpx(content).track_points) == 2

    def test_single_point(self):
        """One trk, one trkseg, one trkpt: singletons behave like lists."""
        stats = parse_gpx(make_gpx(trkpt(47.0, 11.0, 1500, "2026-10-17T08:00:00Z")))

        assert len(stats.track_points) == 1
        assert stats.distance == 0
        assert stats.elevation_gain == 0
        assert stats.elevation_loss == 0
        assert stats.duration is None
        assert stats.max_elevation == 1500

    def test_multiple_tracks_and_segments_keep_order(self):
        content = (
            '<gpx xmlns="http://www.topografix.com/GPX/1/1">'
            f"<trk><trkseg>{trkpt(1, 1)}</trkseg><trkseg>{trkpt(2, 2)}</trkseg></trk>"
            f"<trk><trkseg>{trkpt(3, 3)}{trkpt(4, 4)}</trkseg></trk>"
            "</gpx>"
        )
        stats = parse_gpx(content)
        assert [p.latitude for p in stats.track_points] == [1, 2, 3, 4]

    def test_point_without_lat_is_skipped(self):
        content = make_gpx(trkpt(47.0, 11.0) + trkpt(None, 11.1) + trkpt(47.002, 11.0))
        stats = parse_gpx(content)

        assert len(stats.track_points) == 2
        assert stats.discarded_points == 1

    @pytest.mark.parametrize("bad", ["abc", "NaN", "inf", ""])
    def test_unparseable_coordinate_is_skipped(self, bad):
        content = make_gpx(trkpt(47.0, 11.0) + trkpt(bad, 11.0))
        stats = parse_gpx(content)
        assert len(stats.track_points) == 1
        assert stats.discarded_points == 1

    def test_all_points_missing_coordinates(self):
        content = make_gpx(trkpt(None, 11.0) + trkpt(47.0, None))
        with pytest.raises(EmptyTrackError):
            parse_gpx(content)

    def test_no_tracks(self):
        content = '<gpx xmlns="http://www.topografix.com/GPX/1/1"><wpt lat="1" lon="2"/></gpx>'
        with pytest.raises(EmptyTrackError, match="No valid track points"):
            parse_gpx(content)

    def test_bad_elevation_is_dropped(self):
        stats = parse_gpx(make_gpx(trkpt(47.0, 11.0, "high") + trkpt(47.001, 11.0, 900)))

        assert len(stats.track_points) == 2
        assert stats.track_points[0].elevation is None
        assert stats.max_elevation == 900
        assert stats.elevation_gain == 0

    def test_bad_time_is_dropped(self):
        stats = parse_gpx(make_gpx(
            trkpt(47.0, 11.0, time="yesterday")
            + trkpt(47.001, 11.0, time="2026-10-17T08:00:00Z")
        ))

        assert stats.track_points[0].timestamp is None
        assert stats.duration is None

    def test_elevation_gap(self):
        """[100, -, 150, 120]: gain 50 (100 -> 150), loss 30."""
        stats = parse_gpx(make_gpx(
            trkpt(47.0, 11.0, 100)
            + trkpt(47.001, 11.0)
            + trkpt(47.002, 11.0, 150)
            + trkpt(47.003, 11.0, 120)
        ))
        assert stats.elevation_gain == 50
        assert stats.elevation_loss == 30

    def test_no_elevation_at_all(self):
        stats = parse_gpx(make_gpx(trkpt(47.0, 11.0) + trkpt(47.001, 11.0)))

        assert stats.max_elevation is None
        assert stats.min_elevation is None
        assert stats.elevation_gain == 0
        assert stats.elevation_loss == 0

    def test_unsorted_timestamps(self):
        """Duration spans earliest to latest, whatever the point order."""
        stats = parse_gpx(make_gpx(
            trkpt(47.0, 11.0, time="2026-10-17T09:00:00Z")
            + trkpt(47.001, 11.0, time="2026-10-17T08:00:00Z")
            + trkpt(47.002, 11.0, time="2026-10-17T08:30:00Z")
        ))
        assert stats.duration == 60

    def test_right_angle_distance(self):
        stats = parse_gpx(make_gpx(
            trkpt(0.0, 0.0) + trkpt(0.009, 0.0) + trkpt(0.009, 0.009)
        ))
        assert stats.distance == pytest.approx(2.0, abs=0.01)

    def test_wrong_root(self):
        with pytest.raises(TrackFormatError, match="missing gpx element"):
            parse_gpx(make_tcx(tcx_point(47.0, 11.0)))

    def test_malformed_xml(self):
        with pytest.raises(TrackFormatError):
            parse_gpx("<gpx><trk><trkseg>")

    def test_empty_content(self):
        with pytest.raises(TrackFormatError):
            parse_gpx("")

    def test_bytes_with_bom(self):
        content = b"\xef\xbb\xbf" + CLIMB_GPX.encode("utf-8")
        assert len(parse_gpx(content).track_points) == 3

    def test_idempotent(self):
        assert parse_gpx(CLIMB_GPX) == parse_gpx(CLIMB_GPX)


# =============================================================================
# Test TCX
# =============================================================================

class TestParseTcx:
    """Tests for TCX reading."""

    def test_basic_track(self):
        stats = parse_tcx(make_tcx(
            tcx_point(47.0, 11.0, 1000, "2026-10-17T08:00:00Z"),
            tcx_point(47.001, 11.0, 1040, "2026-10-17T08:20:00Z"),
            tcx_point(47.002, 11.0, 1010, "2026-10-17T08:45:00Z"),
        ))

        assert len(stats.track_points) == 3
        assert stats.elevation_gain == 40
        assert stats.elevation_loss == 30
        assert stats.duration == 45
        assert stats.max_elevation == 1040
        assert stats.min_elevation == 1000

    def test_point_without_position_is_skipped(self):
        stats = parse_tcx(make_tcx(
            tcx_point(time="2026-10-17T07:59:00Z", alt=990),
            tcx_point(47.0, 11.0),
        ))
        assert len(stats.track_points) == 1
        assert stats.discarded_points == 1

    def test_position_missing_longitude(self):
        stats = parse_tcx(make_tcx(tcx_point(47.0, None), tcx_point(47.0, 11.0)))
        assert stats.discarded_points == 1

    def test_optional_fields(self):
        point = parse_tcx(make_tcx(tcx_point(47.0, 11.0))).track_points[0]
        assert point.elevation is None
        assert point.timestamp is None

    def test_multiple_laps(self):
        content = (
            "<TrainingCenterDatabase><Activities><Activity>"
            f"<Lap><Track>{tcx_point(1, 1)}</Track></Lap>"
            f"<Lap><Track>{tcx_point(2, 2)}</Track><Track>{tcx_point(3, 3)}</Track></Lap>"
            "</Activity></Activities></TrainingCenterDatabase>"
        )
        assert [p.latitude for p in parse_tcx(content).track_points] == [1, 2, 3]

    def test_empty(self):
        with pytest.raises(EmptyTrackError, match="TCX"):
            parse_tcx(make_tcx())

    def test_wrong_root(self):
        with pytest.raises(TrackFormatError, match="missing TrainingCenterDatabase"):
            parse_tcx(CLIMB_GPX)


# =============================================================================
# Test Dispatch
# =============================================================================

class TestParseTrack:
    """Tests for extension-based dispatch."""

    def test_gpx_extension(self):
        assert len(parse_track(CLIMB_GPX, "tour.gpx").track_points) == 3

    def test_extension_is_case_insensitive(self):
        assert len(parse_track(CLIMB_GPX, "TOUR.GPX").track_points) == 3

    def test_tcx_extension(self):
        stats = parse_track(make_tcx(tcx_point(47.0, 11.0)), "watch.tcx")
        assert len(stats.track_points) == 1

    def test_tcx_content_with_gpx_extension(self):
        with pytest.raises(TrackFormatError):
            parse_track(make_tcx(tcx_point(47.0, 11.0)), "tour.gpx")

    def test_unknown_extension_gpx_content(self):
        assert len(parse_track(CLIMB_GPX, "upload.xml").track_points) == 3

    def test_unknown_extension_falls_back_to_tcx(self):
        stats = parse_track(make_tcx(tcx_point(47.0, 11.0)), "upload.xml")
        assert len(stats.track_points) == 1

    def test_unknown_extension_empty_gpx_falls_back(self):
        """An empty GPX is a failure too, so TCX is attempted and its error wins."""
        with pytest.raises(TrackFormatError, match="TCX"):
            parse_track(make_gpx(trkpt(None, None)), "upload")

    def test_unknown_extension_garbage(self):
        with pytest.raises(TrackParseError, match="TCX"):
            parse_track("not xml at all", "notes.txt")


# =============================================================================
# Test Field Helpers
# =============================================================================

class TestValidatePoints:
    """Tests for the validate-and-filter pass."""

    def test_counts_discards(self):
        result = validate_points([
            RawTrackPoint("47.0", "11.0"),
            RawTrackPoint(None, "11.0"),
            RawTrackPoint("47.0", "x"),
            RawTrackPoint("47.1", "11.1", elevation="bad", time="bad"),
        ])

        assert len(result.points) == 2
        assert result.discarded == 2
        assert result.points[1].elevation is None
        assert result.points[1].timestamp is None

    def test_whitespace_around_numbers(self):
        result = validate_points([RawTrackPoint(" 47.5 ", "\n11.25\n", elevation=" 812.4 ")])
        assert result.points[0].latitude == 47.5
        assert result.points[0].elevation == 812.4


class TestFieldParsers:
    """Tests for parse_finite_float and parse_timestamp."""

    def test_parse_finite_float(self):
        assert parse_finite_float("12.5") == 12.5
        assert parse_finite_float(None) is None
        assert parse_finite_float("nan") is None
        assert parse_finite_float("-inf") is None

    @pytest.mark.parametrize("text", ["47.25", "-0.0", "1e3", "nan", "inf", "-inf"])
    def test_parse_finite_float_uses_coordinate_check(self, text):
        value = float(text)
        expected = value if is_valid_coordinate(value) else None
        assert parse_finite_float(text) == expected

    def test_timestamp_with_offset(self):
        ts = parse_timestamp("2026-10-17T10:00:00+02:00")
        assert ts == datetime(2026, 10, 17, 8, 0, tzinfo=timezone.utc)

    def test_timestamp_fractional_seconds(self):
        ts = parse_timestamp("2026-10-17T08:00:00.250Z")
        assert ts.microsecond == 250000

    def test_naive_timestamp_is_utc(self):
        assert parse_timestamp("2026-10-17T08:00:00").tzinfo == timezone.utc

    def test_invalid_timestamp(self):
        assert parse_timestamp("17/10/2026") is None
        assert parse_timestamp("") is None
