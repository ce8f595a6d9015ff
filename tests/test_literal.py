"""Test Color::new literal formatting"""
import re
import sys

import pytest
from loguru import logger

from hextocolor.colors.literal import color_literal, convert, format_channel

LITERAL_PATTERN = re.compile(
    r"^Color::new\((-?\d+\.\d+), (-?\d+\.\d+), (-?\d+\.\d+)\);$"
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, "0.0"),
        (1.0, "1.0"),
        (0, "0.0"),
        (1, "1.0"),
        (-0.0, "0.0"),
        (0.5, "0.5"),
        (128 / 255, "0.5019607843137255"),
    ],
)
def test_format_channel(value, expected):
    """Whole numbers get one trailing .0, others keep their digits"""
    assert format_channel(value) == expected


def test_format_channel_uses_default_float_repr():
    """No precision truncation is applied"""
    value = 26 / 255
    assert format_channel(value) == repr(value)


def test_color_literal():
    """Channels are joined and wrapped"""
    assert color_literal((1.0, 0.5, 0.0)) == "Color::new(1.0, 0.5, 0.0);"


def test_convert_black():
    assert convert("000000") == "Color::new(0.0, 0.0, 0.0);"


def test_convert_white():
    assert convert("ffffff") == "Color::new(1.0, 1.0, 1.0);"


def test_convert_uppercase():
    """Uppercase digits parse like lowercase"""
    assert convert("FF0000") == "Color::new(1.0, 0.0, 0.0);"
    assert convert("AbCdEf") == convert("abcdef")


def test_convert_partial():
    assert convert("#ff8000") == "Color::new(1.0, 0.5019607843137255, 0.0);"
    assert convert("1a2b3c") == (
        f"Color::new({26 / 255!r}, {43 / 255!r}, {60 / 255!r});"
    )


def test_convert_hash_prefix_has_no_effect():
    assert convert("#1a2b3c") == convert("1a2b3c")


def test_convert_trims_whitespace():
    assert convert("  1a2b3c  ") == convert("1a2b3c")


def test_convert_ignores_trailing_characters():
    """Only the first six cleaned characters are read"""
    assert convert("#1a2b3c ") == convert("1a2b3c")


def test_convert_matches_literal_pattern(valid_hex_colors):
    for hex_color in valid_hex_colors:
        assert LITERAL_PATTERN.match(convert(hex_color)), hex_color


def test_convert_malformed_degrades_to_zero():
    """Non-hex and missing channels become 0.0 instead of raising"""
    assert convert("zzzzzz") == "Color::new(0.0, 0.0, 0.0);"
    assert convert("ffzz00") == "Color::new(1.0, 0.0, 0.0);"
    assert convert("12") == f"Color::new({18 / 255!r}, 0.0, 0.0);"
    assert convert("") == "Color::new(0.0, 0.0, 0.0);"


def test_convert_is_silent_as_a_library(capsys):
    """Importing and calling convert writes nothing, even with a DEBUG sink"""
    logger.add(sys.stderr, level="DEBUG")
    assert convert("ff8000") == "Color::new(1.0, 0.5019607843137255, 0.0);"
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""
