"""Application settings and configuration management."""

from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import MatchConstants, TimeConstants, WPrimeConstants
from .exceptions import ConfigurationError
from .models import ZoneRange


class Settings(BaseSettings):
    """
    Application settings for the W' balance model.

    Settings are loaded in the following order of precedence (highest to lowest):
    1. Values passed explicitly (e.g. from a YAML file via load_settings)
    2. Environment variables (e.g., WPRIME_DEFAULT_CP)
    3. .env file (if found)
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="WPRIME_", env_file=".env", extra="ignore"
    )

    # --- Model ---
    default_cp: float = WPrimeConstants.DEFAULT_CP  # No zone configuration at all
    decay_period: int = WPrimeConstants.DECAY_PERIOD

    # --- Match detection (empirically tuned) ---
    match_smoothing: int = MatchConstants.SMOOTHING_WINDOW
    match_min_joules: float = MatchConstants.MIN_COST_JOULES
    chart_match_min_joules: float = MatchConstants.CHART_MIN_COST_JOULES

    # --- Streams ---
    recording_interval: int = TimeConstants.DEFAULT_RECORDING_INTERVAL

    # --- CP / W' by date ---
    zone_ranges: list[ZoneRange] = []


def load_settings(config_file: Path | None = None) -> Settings:
    """Load settings from a YAML file, environment variables, and defaults."""
    if config_file:
        with open(config_file, encoding="utf-8") as f:
            yaml_settings = yaml.safe_load(f) or {}

        if not isinstance(yaml_settings, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping"
            )

        try:
            return Settings(**yaml_settings)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    return Settings()
