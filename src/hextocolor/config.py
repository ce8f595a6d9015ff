"""
Application configuration and constants.

The literal shape, accepted input lengths and user-facing messages are
centralized here for easy maintenance.
"""

from typing import Any, Dict, Tuple

# ====================================================================
# APPLICATION CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    "app_name": "hex-to-color",
    "app_version": "0.0.1",
    # Logging (stderr only, stdout is reserved for the literal)
    "log_level": "WARNING",
    "log_levels": ["DEBUG", "INFO", "WARNING", "ERROR"],
    "log_format": "<level>{level: <8}</level> | {message}",
}

# ====================================================================
# HEX PARSING
# ====================================================================

HEX_PREFIX = "#"
HEX_MIN_LENGTH = 6  # FFFFFF
HEX_MAX_LENGTH = 7  # #FFFFFF

CHANNEL_OFFSETS: Tuple[int, int, int] = (0, 2, 4)  # red, green, blue
CHANNEL_WIDTH = 2
CHANNEL_MAX = 255

# ====================================================================
# LITERAL SHAPE
# ====================================================================

LITERAL_CONSTRUCTOR = "Color::new"
LITERAL_TERMINATOR = ";"
CHANNEL_SEPARATOR = ", "

# ====================================================================
# MESSAGES
# ====================================================================

APP_NAME = CONFIG["app_name"]

HEX_FORMAT_ERROR = "Must provide correct hex string format: FFFFFF or #FFFFFF"

USAGE = f"""
Usage: {APP_NAME} HEX_STRING

Hex String to {LITERAL_CONSTRUCTOR} call

Examples:

    $ {APP_NAME} 1a2b3c

    Or with a leading # sign

    $ {APP_NAME} \\#1a2b3c
"""
