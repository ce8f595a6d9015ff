"""Scale float channels back to bytes and hex strings."""

__all__ = [
    "rgb_float_to_rgb",
    "rgb_to_hex",
    "rgb_float_to_hex",
]

import math
from typing import Iterable, Tuple

from hextocolor.config import CHANNEL_MAX, HEX_PREFIX


def _scale_channel(value: float) -> int:
    if math.isnan(value):
        return 0
    return max(0, min(CHANNEL_MAX, round(value * CHANNEL_MAX)))


def rgb_float_to_rgb(rgb: Iterable[float]) -> Tuple[int, int, int]:
    """
    Convert RGB floats (0.0-1.0) to integers (0-255).

    Values are rounded to the nearest byte and clamped; NaN becomes 0.

    Example:
        >>> rgb_float_to_rgb((1.0, 0.5019607843137255, 0.0))
        (255, 128, 0)
        >>> rgb_float_to_rgb((1.5, -0.2, 0.0))
        (255, 0, 0)
    """
    return tuple(_scale_channel(v) for v in rgb)


def rgb_to_hex(rgb: Iterable[int], prefix: str = HEX_PREFIX) -> str:
    """Format an RGB integer tuple as a lowercase hex string."""
    return prefix + "".join(f"{v:02x}" for v in rgb)


def rgb_float_to_hex(rgb: Iterable[float], prefix: str = HEX_PREFIX) -> str:
    """Format an RGB float tuple as a lowercase hex string."""
    return rgb_to_hex(rgb_float_to_rgb(rgb), prefix=prefix)
