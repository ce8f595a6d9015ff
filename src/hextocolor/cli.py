"""
Command-line entry point for hex-to-color.

Prints a ``Color::new`` literal for a hex color string:

    hex-to-color 1a2b3c
    hex-to-color \\#1a2b3c
    python -m hextocolor --log-level DEBUG ff8000

Without an argument the usage text is printed. Diagnostics go to stderr
through loguru so stdout only ever carries the usage text or the literal.
"""

__all__ = [
    "CliError",
    "HexStringFormatError",
    "validate_hex_string",
    "configure_logging",
    "run",
    "main",
]

import argparse
import sys
from typing import List, Optional, Sequence

from loguru import logger

from hextocolor.colors import convert
from hextocolor.config import (
    CONFIG,
    HEX_FORMAT_ERROR,
    HEX_MAX_LENGTH,
    HEX_MIN_LENGTH,
    USAGE,
)


class CliError(Exception):
    """Command-line failure mapped to a process exit status."""

    exit_code = 1


class HexStringFormatError(CliError, ValueError):
    """Hex string argument has the wrong length."""

    def __init__(self, hex_string: str, message: str = HEX_FORMAT_ERROR):
        super().__init__(message)
        self.hex_string = hex_string


def validate_hex_string(hex_string: str) -> str:
    """
    Check that a hex string argument has an acceptable length.

    Only the length is checked; non-hex characters are left to the
    converter, which parses them as 0.

    Args:
        hex_string: Raw command-line argument

    Returns:
        The argument, unchanged

    Raises:
        HexStringFormatError: If the length is outside [6, 7]
    """
    if not HEX_MIN_LENGTH <= len(hex_string) <= HEX_MAX_LENGTH:
        raise HexStringFormatError(hex_string)
    return hex_string


def configure_logging(level: str = CONFIG["log_level"]) -> None:
    """Send loguru output to stderr at the given level."""
    logger.enable("hextocolor")
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONFIG["log_format"])


def run(args: Sequence[str]) -> str:
    """
    Produce the text to print for the given positional arguments.

    Args:
        args: Positional arguments; only the first one is used

    Returns:
        The usage text when no argument is given, otherwise the literal
        framed by blank lines

    Raises:
        HexStringFormatError: If the hex string has the wrong length
    """
    if not args:
        return USAGE

    hex_string = validate_hex_string(args[0])
    literal = convert(hex_string)
    logger.info(f"Converted {hex_string} to {literal}")
    return f"\n {literal} \n"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=CONFIG["app_name"],
        description="Convert a hex color string to a Color::new literal",
    )
    parser.add_argument(
        "hex_strings",
        nargs="*",
        help="Hex color, e.g. 1a2b3c or #1a2b3c (later arguments are ignored)",
    )
    parser.add_argument(
        "--log-level",
        choices=CONFIG["log_levels"],
        default=CONFIG["log_level"],
        help="Set logging level",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {CONFIG['app_version']}",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the command line and return the process exit status.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        0 on success, the error's exit code on a CliError
    """
    options = _build_parser().parse_args(argv)
    configure_logging(options.log_level)

    args: List[str] = options.hex_strings
    try:
        output = run(args)
    except CliError as e:
        logger.error(str(e))
        return e.exit_code

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
