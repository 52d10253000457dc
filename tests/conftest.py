"""
Pytest configuration for notepdf
"""

import logging
import sys
from pathlib import Path

import pytest

from notepdf.engine.geometry import PageGeometry
from notepdf.engine.text_metrics import FixedFontMetrics


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    import tempfile
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def letter_geometry():
    """US Letter page with the default 50pt margin."""
    return PageGeometry(width=612.0, height=792.0, margin=50.0)


@pytest.fixture
def fixed_metrics():
    """Font metrics reporting a 200x60pt box for any text."""
    return FixedFontMetrics(width=200.0, height=60.0)


@pytest.fixture
def note_file(temp_dir):
    """Plain-text note on disk."""
    path = temp_dir / "Meeting.md"
    path.write_text("Agenda\n\nReview the quarterly numbers and plan next steps.", encoding="utf-8")
    return path
