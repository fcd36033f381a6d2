# Summary: Export playlist records and codec exceptions.
# Why: Keep domain imports short for the use cases and tests.

from .errors import (
    EscapeError,
    FormatError,
    MissingHeaderError,
    PlaylistError,
    PlaylistWriteError,
    ScanError,
    StreamOpenError,
    UnexpectedHeaderKeyError,
)
from .models import FIELD_ATTRIBUTES, HEADER_KEY, TRACK_FIELDS, URI_KEY, Playlist, Track

__all__ = [
    "EscapeError",
    "FIELD_ATTRIBUTES",
    "FormatError",
    "HEADER_KEY",
    "MissingHeaderError",
    "Playlist",
    "PlaylistError",
    "PlaylistWriteError",
    "ScanError",
    "StreamOpenError",
    "TRACK_FIELDS",
    "Track",
    "URI_KEY",
    "UnexpectedHeaderKeyError",
]
