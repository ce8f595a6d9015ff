"""Pytest configuration and shared fixtures"""
import sys
from pathlib import Path

import pytest
from loguru import logger

# Add src/ to path so the tests run without an install
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture(autouse=True)
def reset_logger():
    """Start each test with the package silent, drop sinks the CLI added"""
    logger.disable("hextocolor")
    yield
    logger.remove()
    logger.disable("hextocolor")


@pytest.fixture
def valid_hex_colors():
    """Six-digit hex colors in mixed case"""
    return ["000000", "ffffff", "1a2b3c", "FF0000", "7f7f7f", "AbCdEf", "010203"]
