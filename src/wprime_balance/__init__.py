"""W' Balance - Skiba W' balance modelling and match detection for power data."""

__version__ = "0.3.0"

from . import analysis, constants, data, exceptions, metrics, models, zones
from .analysis import (
    MinWPrime,
    WPrime,
    WPrimeCalculator,
    WPrimeWorkspace,
    register_wprime_metrics,
)
from .data import Resampler, StreamLoader
from .metrics import (
    DecayConvolution,
    MatchDetector,
    MetricCatalogue,
    RideMetric,
    ThresholdExtractor,
)
from .models import (
    DepletionSeries,
    Match,
    MatchMarkers,
    PowerStream,
    Thresholds,
    WPrimeResult,
    ZoneRange,
)
from .settings import Settings, load_settings
from .zones import ZoneConfiguration, ZoneProvider


def get_version() -> str:
    """Get the current version of wprime_balance."""
    return __version__


def get_package_info() -> dict[str, str]:
    """Get package information including name and version."""
    return {
        "name": "wprime-balance",
        "version": __version__,
        "description": "W' balance and match detection for cycling power data",
    }


__all__ = [
    # Version & Info
    "get_version",
    "get_package_info",
    # Models
    "DepletionSeries",
    "Match",
    "MatchMarkers",
    "PowerStream",
    "Thresholds",
    "WPrimeResult",
    "ZoneRange",
    # Configuration
    "Settings",
    "load_settings",
    "ZoneConfiguration",
    "ZoneProvider",
    # Data Layer
    "Resampler",
    "StreamLoader",
    # Model stages
    "DecayConvolution",
    "MatchDetector",
    "ThresholdExtractor",
    # Analysis Layer
    "WPrime",
    "WPrimeWorkspace",
    # Metrics
    "MetricCatalogue",
    "MinWPrime",
    "RideMetric",
    "WPrimeCalculator",
    "register_wprime_metrics",
    # Modules
    "analysis",
    "constants",
    "data",
    "exceptions",
    "metrics",
    "models",
    "zones",
]
