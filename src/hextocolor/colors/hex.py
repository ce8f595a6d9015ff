"""
Hex color parsing - no external dependencies.

Pure functions turning a hex color string into byte or float channels.
Malformed channels never raise: anything that is not exactly two hex
digits parses to 0.
"""

__all__ = [
    "clean_hex",
    "chunk_hex",
    "parse_channel",
    "hex_to_rgb",
    "hex_to_rgb_float",
]

import string
from typing import Tuple

from hextocolor.config import (
    CHANNEL_MAX,
    CHANNEL_OFFSETS,
    CHANNEL_WIDTH,
    HEX_PREFIX,
)

_HEX_DIGITS = frozenset(string.hexdigits)


def clean_hex(hex_color: str) -> str:
    """
    Normalize a hex color string.

    A leading ``#`` is dropped as-is; otherwise surrounding whitespace
    is stripped.

    Args:
        hex_color: Hex color string (e.g., "#77aadd" or " 77aadd ")

    Returns:
        The hex digits without prefix

    Example:
        >>> clean_hex("#77aadd")
        '77aadd'
        >>> clean_hex("  77aadd ")
        '77aadd'
    """
    if hex_color.startswith(HEX_PREFIX):
        return hex_color[len(HEX_PREFIX) :]
    return hex_color.strip()


def chunk_hex(hex_digits: str) -> Tuple[str, str, str]:
    """
    Split cleaned hex digits into red, green and blue chunks.

    Always returns three chunks; short input yields short or empty ones.

    Example:
        >>> chunk_hex("1a2b3c")
        ('1a', '2b', '3c')
        >>> chunk_hex("1a2")
        ('1a', '2', '')
    """
    return tuple(hex_digits[i : i + CHANNEL_WIDTH] for i in CHANNEL_OFFSETS)


def parse_channel(chunk: str) -> int:
    """
    Parse a two-digit hex chunk to an integer (0-255).

    Chunks that are not exactly two hex digits parse to 0.

    Example:
        >>> parse_channel("Ff")
        255
        >>> parse_channel("zz")
        0
    """
    if len(chunk) != CHANNEL_WIDTH or not _HEX_DIGITS.issuperset(chunk):
        return 0
    return int(chunk, 16)


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """
    Read the red, green and blue bytes of a hex color.

    The string is cleaned with ``clean_hex`` and only its first six
    characters are read. A channel that is missing or not valid hex
    comes out as 0, so the result always has three entries.

    Args:
        hex_color: "#1a2b3c", "1a2b3c" or " 1a2b3c "

    Returns:
        (r, g, b) bytes, each 0-255

    Example:
        >>> hex_to_rgb("#ff8000")
        (255, 128, 0)
        >>> hex_to_rgb("ffzz")
        (255, 0, 0)
    """
    return tuple(parse_channel(c) for c in chunk_hex(clean_hex(hex_color)))


def hex_to_rgb_float(hex_color: str) -> Tuple[float, float, float]:
    """
    Scale the bytes from ``hex_to_rgb`` down to 0.0-1.0 by dividing by 255.

    Malformed channels come out as 0.0.

    Example:
        >>> hex_to_rgb_float("#ff8000")
        (1.0, 0.5019607843137255, 0.0)
        >>> hex_to_rgb_float("00zzff")
        (0.0, 0.0, 1.0)
    """
    return tuple(v / CHANNEL_MAX for v in hex_to_rgb(hex_color))
