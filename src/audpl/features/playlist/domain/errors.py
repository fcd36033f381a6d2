"""
Summary: Exception hierarchy raised by the playlist codec.
Why: Let callers catch one base class while still telling failures apart.
"""

from __future__ import annotations


class PlaylistError(Exception):
    """Base exception for playlist reading and writing failures."""


class StreamOpenError(PlaylistError):
    """Raised when a playlist file cannot be opened for reading."""


class FormatError(PlaylistError):
    """Raised when the input does not look like a playlist."""


class MissingHeaderError(FormatError):
    """Raised when the stream yields no header line."""

    def __init__(self, message: str = "missing header") -> None:
        super().__init__(message)


class UnexpectedHeaderKeyError(FormatError):
    """Raised when the first line is not a ``title=`` header."""

    def __init__(self, key: str) -> None:
        super().__init__(f"unexpected header key {key!r}")
        self.key = key


class ScanError(FormatError):
    """Raised when reading fails after the header was accepted."""

    def __init__(self, message: str = "scan failure") -> None:
        super().__init__(message)


class PlaylistWriteError(PlaylistError, OSError):
    """Raised when the encoded playlist cannot be written to its sink."""


class EscapeError(ValueError):
    """Raised for a truncated or non-hexadecimal percent escape."""


__all__ = [
    "EscapeError",
    "FormatError",
    "MissingHeaderError",
    "PlaylistError",
    "PlaylistWriteError",
    "ScanError",
    "StreamOpenError",
    "UnexpectedHeaderKeyError",
]
