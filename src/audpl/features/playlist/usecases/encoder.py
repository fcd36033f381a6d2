"""
Summary: Encoder writing a Playlist back into ``.audpl`` text.
Why: Emit the same line shape the decoder reads so saving is lossless.
"""

from __future__ import annotations

from collections.abc import Iterator
from io import BytesIO
from pathlib import Path
from typing import IO

from audpl.features.playlist.domain.errors import PlaylistWriteError
from audpl.features.playlist.domain.models import HEADER_KEY, TRACK_FIELDS, Playlist
from audpl.features.playlist.usecases.escaping import escape
from audpl.platform.logging import logger


def _render_lines(playlist: Playlist, space_as_plus: bool) -> Iterator[str]:
    yield f"{HEADER_KEY}={escape(playlist.name, space_as_plus=space_as_plus)}\n"

    for track in playlist.tracks:
        for key, attribute in TRACK_FIELDS:
            value: str = getattr(track, attribute)
            if not value:
                continue
            yield f"{key}={escape(value, space_as_plus=space_as_plus)}\n"


def save_to(
    playlist: Playlist,
    sink: IO[bytes],
    *,
    space_as_plus: bool = True,
) -> None:
    """Write ``playlist`` to a binary sink.

    Empty fields are skipped and ``comment`` is never written. Values are not
    validated; ``=`` and newlines inside them are escaped like everything else.

    Args:
        playlist: Playlist to encode.
        sink: Writable binary stream. It is not closed.
        space_as_plus: Escape spaces as ``+`` rather than ``%20``.

    Raises:
        PlaylistWriteError: If writing to ``sink`` fails, including writes
            to an already closed sink.
    """
    try:
        for line in _render_lines(playlist, space_as_plus):
            _ = sink.write(line.encode("ascii"))
    except (OSError, ValueError) as exc:
        raise PlaylistWriteError(f"failed to write playlist {playlist.name!r}") from exc

    logger.debug("Encoded playlist %r with %d tracks", playlist.name, len(playlist.tracks))


def save_to_bytes(playlist: Playlist, *, space_as_plus: bool = True) -> bytes:
    """Return the encoded form of ``playlist``."""

    buffer = BytesIO()
    save_to(playlist, buffer, space_as_plus=space_as_plus)
    return buffer.getvalue()


def save_file(
    playlist: Playlist,
    path: Path | str,
    *,
    space_as_plus: bool = True,
) -> None:
    """Write ``playlist`` to ``path``, creating parent directories as needed.

    Raises:
        PlaylistWriteError: If the file cannot be created or written.
    """
    file_path = Path(path)
    content = save_to_bytes(playlist, space_as_plus=space_as_plus)

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        _ = file_path.write_bytes(content)
    except OSError as exc:
        raise PlaylistWriteError(f"failed to write playlist file {file_path}") from exc

    logger.debug("Saved playlist %r to %s", playlist.name, file_path)


__all__ = ["save_file", "save_to", "save_to_bytes"]
