"""
Summary: Playlist and Track records plus the ordered key table of the format.
Why: Give the decoder and encoder one shared definition of which keys exist.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final


@dataclass(slots=True)
class Track:
    """One playlist entry.

    Every field is kept as the exact string found in the file. Numeric-looking
    fields such as ``year`` or ``length`` are not coerced because players
    format them differently.
    """

    uri: str = ""
    title: str = ""
    artist: str = ""
    album: str = ""
    album_artist: str = ""
    comment: str = ""
    genre: str = ""
    year: str = ""
    track_number: str = ""
    length: str = ""
    bitrate: str = ""
    codec: str = ""
    quality: str = ""


@dataclass(slots=True)
class Playlist:
    """A named, ordered list of tracks."""

    name: str = ""
    tracks: list[Track] = field(default_factory=list)


# Key that opens a new track record.
URI_KEY: Final[str] = "uri"

# Header key carrying the playlist name.
HEADER_KEY: Final[str] = "title"

# (file key, Track attribute) pairs in the order they are written.
# ``comment`` has no key in the format and is therefore absent.
TRACK_FIELDS: Final[tuple[tuple[str, str], ...]] = (
    (URI_KEY, "uri"),
    ("title", "title"),
    ("artist", "artist"),
    ("album", "album"),
    ("album-artist", "album_artist"),
    ("genre", "genre"),
    ("year", "year"),
    ("track-number", "track_number"),
    ("length", "length"),
    ("bitrate", "bitrate"),
    ("codec", "codec"),
    ("quality", "quality"),
)

# Non-boundary keys the decoder assigns onto the open track.
FIELD_ATTRIBUTES: Final[dict[str, str]] = {
    key: attribute for key, attribute in TRACK_FIELDS if key != URI_KEY
}


__all__ = [
    "FIELD_ATTRIBUTES",
    "HEADER_KEY",
    "Playlist",
    "TRACK_FIELDS",
    "Track",
    "URI_KEY",
]
