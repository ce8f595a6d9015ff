"""
hextocolor - Turn hex color strings into Color::new literals.

This package is organized into focused modules:

- colors/   Color utilities (pure functions)
            - hex: clean_hex, chunk_hex, parse_channel, hex_to_rgb, hex_to_rgb_float
            - literal: format_channel, color_literal, convert
            - scale: rgb_float_to_rgb, rgb_to_hex, rgb_float_to_hex

- config    Literal shape, accepted lengths, messages and usage text

- cli       Command-line entry point (hex-to-color)
            - run, main, HexStringFormatError

Usage:
    from hextocolor import convert
    convert("#1a2b3c")
"""

__version__ = "0.0.1"

from loguru import logger

# Silent unless the command line turns logging on
logger.disable("hextocolor")

from hextocolor.colors import (
    clean_hex,
    chunk_hex,
    parse_channel,
    hex_to_rgb,
    hex_to_rgb_float,
    format_channel,
    color_literal,
    convert,
    rgb_float_to_rgb,
    rgb_to_hex,
    rgb_float_to_hex,
)

__all__ = [
    "__version__",
    # colors.hex
    "clean_hex",
    "chunk_hex",
    "parse_channel",
    "hex_to_rgb",
    "hex_to_rgb_float",
    # colors.literal
    "format_channel",
    "color_literal",
    "convert",
    # colors.scale
    "rgb_float_to_rgb",
    "rgb_to_hex",
    "rgb_float_to_hex",
]
