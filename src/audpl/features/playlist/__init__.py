# Path: `src/audpl/features/playlist/__init__.py`
# Summary: Export the playlist feature domain and use case symbols.
# Why: Provide a stable import surface for callers and tests.

from .domain import (
    EscapeError,
    FormatError,
    MissingHeaderError,
    Playlist,
    PlaylistError,
    PlaylistWriteError,
    ScanError,
    StreamOpenError,
    Track,
    UnexpectedHeaderKeyError,
)
from .usecases import (
    escape,
    parse,
    parse_file,
    parse_lines,
    save_file,
    save_to,
    save_to_bytes,
    split_kv,
    unescape,
)

__all__ = [
    "EscapeError",
    "FormatError",
    "MissingHeaderError",
    "Playlist",
    "PlaylistError",
    "PlaylistWriteError",
    "ScanError",
    "StreamOpenError",
    "Track",
    "UnexpectedHeaderKeyError",
    "escape",
    "parse",
    "parse_file",
    "parse_lines",
    "save_file",
    "save_to",
    "save_to_bytes",
    "split_kv",
    "unescape",
]
