"""
Color literal formatting (loguru for debug output).

Renders float channels as a ``Color::new(r, g, b);`` constructor call.
"""

__all__ = [
    "format_channel",
    "color_literal",
    "convert",
]

from typing import Iterable

from loguru import logger

from hextocolor.colors.hex import hex_to_rgb_float
from hextocolor.config import (
    CHANNEL_SEPARATOR,
    LITERAL_CONSTRUCTOR,
    LITERAL_TERMINATOR,
)


def format_channel(value: float) -> str:
    """
    Render a channel value with at least one decimal digit.

    Whole numbers get exactly one trailing ``.0``; anything else uses the
    default float-to-string conversion, unmodified.

    Example:
        >>> format_channel(1)
        '1.0'
        >>> format_channel(128 / 255)
        '0.5019607843137255'
    """
    if float(value).is_integer():
        return f"{int(value)}.0"
    return repr(float(value))


def color_literal(channels: Iterable[float]) -> str:
    """
    Build the constructor call for a channel triplet.

    Args:
        channels: Red, green and blue values

    Returns:
        Literal string, e.g. "Color::new(1.0, 0.0, 0.0);"
    """
    args = CHANNEL_SEPARATOR.join(format_channel(c) for c in channels)
    return f"{LITERAL_CONSTRUCTOR}({args}){LITERAL_TERMINATOR}"


def convert(hex_color: str) -> str:
    """
    Convert a hex color string to a ``Color::new`` literal.

    Args:
        hex_color: Hex color string (e.g., "#1a2b3c" or "1a2b3c")

    Returns:
        Literal string with one float argument per channel

    Example:
        >>> convert("#ff8000")
        'Color::new(1.0, 0.5019607843137255, 0.0);'
        >>> convert("000000")
        'Color::new(0.0, 0.0, 0.0);'
    """
    channels = hex_to_rgb_float(hex_color)
    logger.debug(f"Parsed {hex_color!r} to channels {channels}")
    return color_literal(channels)
