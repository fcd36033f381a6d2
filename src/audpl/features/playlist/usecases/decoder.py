"""
Summary: Streaming decoder turning ``.audpl`` text into a Playlist.
Why: Group flat key/value lines into tracks using ``uri`` as the record boundary.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO

from audpl.features.playlist.domain.errors import (
    EscapeError,
    MissingHeaderError,
    ScanError,
    StreamOpenError,
    UnexpectedHeaderKeyError,
)
from audpl.features.playlist.domain.models import (
    FIELD_ATTRIBUTES,
    HEADER_KEY,
    URI_KEY,
    Playlist,
    Track,
)
from audpl.features.playlist.usecases.escaping import split_raw_kv, unescape, unescape_or_raw
from audpl.platform.logging import logger


class _TrackAccumulator:
    """Collect tracks while scanning the playlist body.

    ``uri`` lines are boundary events: they close the open track (when it
    already has a URI) and start a fresh one. Every other recognized key
    fills a field of the open track.
    """

    def __init__(self) -> None:
        self.tracks: list[Track] = []
        self.current: Track = Track()

    def feed(self, line: str) -> None:
        key, raw_value = split_raw_kv(line)

        if key == URI_KEY:
            self._open_track(raw_value)
            return

        attribute = FIELD_ATTRIBUTES.get(key)
        if attribute is None:
            logger.debug("Ignoring unrecognized key %r", key)
            return

        setattr(self.current, attribute, unescape_or_raw(raw_value))

    def _open_track(self, raw_uri: str) -> None:
        if self.current.uri:
            self.tracks.append(self.current)
            self.current = Track()

        try:
            self.current.uri = unescape(raw_uri)
        except EscapeError as exc:
            # A bad URI drops only this field, not the whole playlist.
            logger.debug("Discarding undecodable uri: %s", exc)
            self.current.uri = ""

    def finish(self) -> list[Track]:
        """Flush the open track and return every collected track.

        The open track is appended even when no ``uri`` line was ever seen,
        so a body without URIs still yields one track with an empty ``uri``.
        """
        self.tracks.append(self.current)
        self.current = Track()
        return self.tracks


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _iter_stream_lines(stream: IO[bytes]) -> Iterator[str]:
    for raw_line in stream:
        # Non UTF-8 bytes become lone surrogates so one odd value cannot
        # abort the scan; the escaper writes them back unchanged.
        yield raw_line.decode("utf-8", "surrogateescape")


def parse_lines(lines: Iterable[str]) -> Playlist:
    """Decode a playlist from text lines.

    Args:
        lines: Lines of the file. Trailing ``\\n`` / ``\\r\\n`` is ignored.

    Returns:
        Playlist: Decoded playlist.

    Raises:
        MissingHeaderError: If there is no first line or it cannot be read.
        UnexpectedHeaderKeyError: If the first line is not ``title=...``.
        ScanError: If reading fails after the header.
    """
    iterator = iter(lines)

    try:
        header = next(iterator)
    except StopIteration:
        raise MissingHeaderError() from None
    except OSError as exc:
        raise MissingHeaderError() from exc

    key, raw_name = split_raw_kv(_strip_terminator(header))
    if key != HEADER_KEY:
        raise UnexpectedHeaderKeyError(key)

    accumulator = _TrackAccumulator()
    try:
        for line in iterator:
            accumulator.feed(_strip_terminator(line))
    except OSError as exc:
        raise ScanError() from exc

    playlist = Playlist(name=unescape_or_raw(raw_name), tracks=accumulator.finish())
    logger.debug("Decoded playlist %r with %d tracks", playlist.name, len(playlist.tracks))
    return playlist


def parse(stream: IO[bytes]) -> Playlist:
    """Decode a playlist from a readable binary stream.

    The stream is consumed line by line and is not closed.
    """
    return parse_lines(_iter_stream_lines(stream))


def parse_file(path: Path | str) -> Playlist:
    """Open ``path`` and decode the playlist it holds.

    Raises:
        StreamOpenError: If the file cannot be opened.
        FormatError: If the content is not a valid playlist.
    """
    file_path = Path(path)
    try:
        stream = file_path.open("rb")
    except OSError as exc:
        raise StreamOpenError(f"failed to open playlist {file_path}") from exc

    with stream:
        return parse(stream)


__all__ = ["parse", "parse_file", "parse_lines"]
