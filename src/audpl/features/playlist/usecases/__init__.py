"""
Summary: Export decode, encode and escaping operations of the playlist codec.
Why: Offer one import location for the codec entry points.
"""

from .decoder import parse, parse_file, parse_lines
from .encoder import save_file, save_to, save_to_bytes
from .escaping import escape, split_kv, split_raw_kv, unescape, unescape_or_raw

__all__ = [
    "escape",
    "parse",
    "parse_file",
    "parse_lines",
    "save_file",
    "save_to",
    "save_to_bytes",
    "split_kv",
    "split_raw_kv",
    "unescape",
    "unescape_or_raw",
]
