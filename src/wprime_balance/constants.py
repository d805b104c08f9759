"""
Constants used throughout the W' balance package.

The W' model constants come from Skiba et al., "Modeling the Expenditure and
Reconstitution of Work Capacity above Critical Power" (MSSE 2012). The match
thresholds are empirically tuned values, not derived from the model.
"""

from typing import Final


# === Time Constants ===
class TimeConstants:
    """Time-related constants in seconds."""

    SECONDS_PER_MINUTE: Final[int] = 60
    SECONDS_PER_HOUR: Final[int] = 3600

    DEFAULT_RECORDING_INTERVAL: Final[int] = 1


# === W' Model ===
class WPrimeConstants:
    """Constants of the W' expenditure/reconstitution model."""

    DECAY_PERIOD: Final[int] = 1200  # 20 minutes of trailing effort
    MULT_CONST: Final[float] = 1.0

    # TAU = 546 * e^(-0.01 * (CP - below CP mean)) + 316
    TAU_AMPLITUDE: Final[float] = 546.0
    TAU_RATE: Final[float] = -0.01
    TAU_OFFSET: Final[float] = 316.0

    DEFAULT_CP: Final[float] = 250.0  # used when no zone configuration exists


# === Match Detection ===
class MatchConstants:
    """Empirically tuned match detection parameters."""

    SMOOTHING_WINDOW: Final[int] = 25  # seconds
    MIN_COST_JOULES: Final[float] = 100.0
    CHART_MIN_COST_JOULES: Final[float] = 2000.0  # markers on the W' chart


# === Metric Catalogue ===
class MetricSymbols:
    """Symbols of the metrics this package provides."""

    MIN_WPRIME: Final[str] = "skiba_wprime_low"


# === CSV Files ===
class CSVConstants:
    """Stream file layout."""

    DEFAULT_SEPARATOR: Final[str] = ","
    TIME_COLUMN: Final[str] = "time"
    POWER_COLUMN: Final[str] = "watts"
