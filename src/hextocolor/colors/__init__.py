"""
Color utilities subpackage - pure functions, loguru for debug output only.

Hex parsing, literal formatting and channel scaling.
"""

from hextocolor.colors.hex import (
    clean_hex,
    chunk_hex,
    parse_channel,
    hex_to_rgb,
    hex_to_rgb_float,
)

from hextocolor.colors.literal import (
    format_channel,
    color_literal,
    convert,
)

from hextocolor.colors.scale import (
    rgb_float_to_rgb,
    rgb_to_hex,
    rgb_float_to_hex,
)

__all__ = [
    # hex
    "clean_hex",
    "chunk_hex",
    "parse_channel",
    "hex_to_rgb",
    "hex_to_rgb_float",
    # literal
    "format_channel",
    "color_literal",
    "convert",
    # scale
    "rgb_float_to_rgb",
    "rgb_to_hex",
    "rgb_float_to_hex",
]
