"""
Summary: Percent-escaping primitives and the key/value line splitter.
Why: Keep value escaping identical on the read and write paths.
"""

from __future__ import annotations

import re
from typing import Final
from urllib.parse import quote, quote_plus, unquote_to_bytes

from audpl.features.playlist.domain.errors import EscapeError
from audpl.platform.logging import logger

# A '%' that is not followed by two hex digits.
_MALFORMED_ESCAPE: Final[re.Pattern[str]] = re.compile(r"%(?![0-9A-Fa-f]{2})")

_KV_SEPARATOR: Final[str] = "="

# Text is mapped to bytes with surrogateescape so lone surrogates from
# os.fsdecode() survive a round trip as the original raw bytes.
_TEXT_ENCODING: Final[str] = "utf-8"
_TEXT_ERRORS: Final[str] = "surrogateescape"


def escape(value: str, *, space_as_plus: bool = True) -> str:
    """Escape ``value`` using URL query-component rules.

    Args:
        value: Text to escape. It is encoded as UTF-8 first; lone
            surrogates are written back as the bytes they stand for.
        space_as_plus: Write spaces as ``+`` instead of ``%20``.

    Returns:
        str: ASCII text where every byte outside ``A-Za-z0-9-_.~`` is
        written as ``%XX``.
    """
    raw = value.encode(_TEXT_ENCODING, _TEXT_ERRORS)
    if space_as_plus:
        return quote_plus(raw, safe="")
    return quote(raw, safe="")


def unescape(text: str) -> str:
    """Decode a query-component escaped string.

    Bytes that are not valid UTF-8 decode to lone surrogates, so
    ``escape(unescape(text))`` restores them.

    Args:
        text: Escaped text. ``+`` decodes to a space.

    Returns:
        str: Decoded text.

    Raises:
        EscapeError: If an escape is truncated or not hexadecimal.
    """
    match = _MALFORMED_ESCAPE.search(text)
    if match is not None:
        raise EscapeError(f"invalid escape at offset {match.start()} in {text!r}")

    raw = unquote_to_bytes(text.replace("+", " ").encode(_TEXT_ENCODING, _TEXT_ERRORS))
    return raw.decode(_TEXT_ENCODING, _TEXT_ERRORS)


def unescape_or_raw(text: str) -> str:
    """Decode ``text`` or return it unchanged when it cannot be decoded."""

    try:
        return unescape(text)
    except EscapeError as exc:
        logger.debug("Keeping raw value: %s", exc)
        return text


def split_raw_kv(line: str) -> tuple[str, str]:
    """Split ``key=value`` on the first ``=`` leaving the value escaped.

    A line without ``=`` is returned as ``(line, "")``.
    """
    key, _, raw_value = line.partition(_KV_SEPARATOR)
    return key, raw_value


def split_kv(line: str) -> tuple[str, str]:
    """Split ``key=value`` on the first ``=`` and unescape the value."""

    key, raw_value = split_raw_kv(line)
    return key, unescape_or_raw(raw_value)


__all__ = ["escape", "split_kv", "split_raw_kv", "unescape", "unescape_or_raw"]
