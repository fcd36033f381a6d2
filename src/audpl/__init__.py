"""Read and write ``.audpl`` key/value playlists."""

from audpl.features.playlist import (
    FormatError,
    MissingHeaderError,
    Playlist,
    PlaylistError,
    PlaylistWriteError,
    ScanError,
    StreamOpenError,
    Track,
    UnexpectedHeaderKeyError,
    parse,
    parse_file,
    parse_lines,
    save_file,
    save_to,
    save_to_bytes,
)

__all__ = [
    "FormatError",
    "MissingHeaderError",
    "Playlist",
    "PlaylistError",
    "PlaylistWriteError",
    "ScanError",
    "StreamOpenError",
    "Track",
    "UnexpectedHeaderKeyError",
    "parse",
    "parse_file",
    "parse_lines",
    "save_file",
    "save_to",
    "save_to_bytes",
]
