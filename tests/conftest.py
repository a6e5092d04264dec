"""Pytest fixtures for Sun Image tests."""

import datetime
import json
import sys
from pathlib import Path
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sun_image.data.record import SunRecord  # noqa: E402


@pytest.fixture
def sample_config_dict():
    """Sample configuration dictionary."""
    return {
        "location": {
            "name": "Onset, MA",
            "region": "USA",
            "timezone": "America/New_York",
            "latitude": 42.4,
            "longitude": -71.6,
        },
        "image": {"width": 1920, "height": 1080, "jpeg_quality": 80},
    }


@pytest.fixture
def temp_config_file(tmp_path, sample_config_dict):
    """Create a temporary config file."""
    config_path = tmp_path / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_dict, f)
    return config_path


@pytest.fixture
def sample_config(sample_config_dict):
    """Create a Config object from sample data."""
    from sun_image.config import _dict_to_config

    return _dict_to_config(sample_config_dict)


@pytest.fixture
def june_record():
    """Mid summer, sunrise before 6 AM and sunset after 8 PM."""
    return SunRecord(
        sunrise="05:10",
        sunset="20:25",
        moonrise="-:-",
        moonset="02:13",
        current_time="13:30:12.345",
        date="2021-06-21",
    )


@pytest.fixture
def december_record():
    """Mid winter, sunrise after 7 AM and sunset before 4:30 PM."""
    return SunRecord(
        sunrise="07:05",
        sunset="16:20",
        moonrise="15:02",
        moonset="-:-",
        current_time="22:15:00.000",
        date="2021-12-21",
    )


@pytest.fixture
def fixed_now():
    """A fixed local time at the sample location."""
    return datetime.datetime(
        2021, 6, 21, 13, 30, 12, 345000, tzinfo=ZoneInfo("America/New_York")
    )


@pytest.fixture
def mock_provider(june_record, fixed_now):
    """Mock SolarProvider returning the June record."""
    provider = MagicMock()
    provider.tz = ZoneInfo("America/New_York")
    provider.now.return_value = fixed_now
    provider.get_sun_record.return_value = june_record
    return provider
