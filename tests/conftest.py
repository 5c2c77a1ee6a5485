"""Pytest configuration and fixtures."""
import json
import sys
from datetime import date
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from carerota.models.config import Config

# 2024-01-01 is a Monday, ISO week 2024-01
MONDAY_W0 = date(2024, 1, 1)


@pytest.fixture
def abc_config():
    """Three caretakers starting on a Monday."""
    return Config(start_date=MONDAY_W0, caretakers=("A", "B", "C"))


@pytest.fixture
def year_end_config():
    """Rotation starting in ISO week 2024-52."""
    return Config(start_date=date(2024, 12, 23), caretakers=("Alice", "Bob", "Charlie"))


@pytest.fixture
def sample_config_path():
    """Path to the test data file."""
    return Path(__file__).parent / "data" / "config_sample.json"


@pytest.fixture
def write_config(tmp_path):
    """Write a JSON document (or raw text) to a temp file and return its path."""
    def _write(payload, name="config.json"):
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path
    return _write
