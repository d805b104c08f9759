"""
Shared pytest fixtures for W' balance tests.

This module provides reusable fixtures for:
- Settings and zone configurations
- Synthetic power streams
- Temporary configuration files
"""

from datetime import date
from pathlib import Path

import pandas as pd
import pytest
import yaml

from wprime_balance.models import ZoneRange
from wprime_balance.settings import Settings
from wprime_balance.zones import ZoneConfiguration

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    """Provide default settings."""
    return Settings()


@pytest.fixture
def activity_date() -> date:
    """Provide a date covered by the test zone configuration."""
    return date(2024, 6, 1)


@pytest.fixture
def zones_cp200() -> ZoneConfiguration:
    """Provide zones with CP=200W and W'=20kJ from 2024."""
    return ZoneConfiguration(
        [ZoneRange(start_date=date(2024, 1, 1), cp=200, w_prime=20000)]
    )


@pytest.fixture
def zones_cp250() -> ZoneConfiguration:
    """Provide zones with CP=250W and W'=20kJ from 2024."""
    return ZoneConfiguration(
        [ZoneRange(start_date=date(2024, 1, 1), cp=250, w_prime=20000)]
    )


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary YAML config file path for testing."""
    return tmp_path / "config.yaml"


@pytest.fixture
def sample_config_dict() -> dict:
    """Provide a sample configuration dictionary."""
    return {
        "default_cp": 260,
        "match_min_joules": 150,
        "zone_ranges": [
            {"start_date": "2024-01-01", "cp": 200, "w_prime": 20000},
            {"start_date": "2025-01-01", "cp": 220, "w_prime": 18000},
        ],
    }


@pytest.fixture
def sample_config_file(tmp_path: Path, sample_config_dict: dict) -> Path:
    """Create a temporary config file with sample data."""
    config_path = tmp_path / "config.yaml"
    with open(config_path, "w") as f:
        yaml.dump(sample_config_dict, f)
    return config_path


# ============================================================================
# Data Fixtures - Streams
# ============================================================================


@pytest.fixture
def plateau_watts() -> list[int]:
    """
    Provide 1Hz power with one 20 second effort at 300W.

    The 40 second tail at 100W is long enough for the 25 second trailing
    average to fall back under a CP of 200W.
    """
    return [100] * 10 + [300] * 20 + [100] * 40


@pytest.fixture
def plateau_stream(plateau_watts: list[int]) -> pd.DataFrame:
    """Provide the plateau effort as a stream."""
    return pd.DataFrame({"time": range(len(plateau_watts)), "watts": plateau_watts})


@pytest.fixture
def two_efforts_stream() -> pd.DataFrame:
    """Provide a stream with two separate efforts above 200W."""
    watts = [100] * 10 + [300] * 20 + [100] * 40 + [350] * 20 + [100] * 40
    return pd.DataFrame({"time": range(len(watts)), "watts": watts})


@pytest.fixture
def zero_power_stream() -> pd.DataFrame:
    """Provide ten minutes of zero power."""
    return pd.DataFrame({"time": range(600), "watts": [0] * 600})


@pytest.fixture
def stream_no_power() -> pd.DataFrame:
    """Provide a stream without a power channel."""
    return pd.DataFrame({"time": [0, 1, 2, 3], "heartrate": [120, 125, 130, 128]})


@pytest.fixture
def plateau_csv(tmp_path: Path, plateau_stream: pd.DataFrame) -> Path:
    """Write the plateau stream to a CSV file."""
    path = tmp_path / "stream.csv"
    plateau_stream.to_csv(path, index=False)
    return path
