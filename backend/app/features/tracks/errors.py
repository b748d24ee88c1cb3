"""Errors raised while reading GPX/TCX track files."""


class TrackParseError(ValueError):
    """Base class: the file could not be turned into a track."""


class TrackFormatError(TrackParseError):
    """Not a valid file of the attempted format (bad XML or wrong root)."""


class EmptyTrackError(TrackParseError):
    """Structurally valid file that holds no usable GPS point."""
