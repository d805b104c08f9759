"""
CP, W' and TAU for one activity.

TAU follows Skiba's reconstitution model, where recovery is faster the further
below CP the athlete rides:

    TAU = 546 * e^(-0.01 * (CP - mean power below CP)) + 316
"""

import logging
from datetime import date

import numpy as np

from ..constants import WPrimeConstants
from ..models import Thresholds
from ..settings import Settings
from ..zones import ZoneProvider

logger = logging.getLogger(__name__)


def calculate_tau(cp: float, below_cp_mean: float) -> int:
    """Return TAU in whole seconds, truncated rather than rounded."""
    tau = (
        WPrimeConstants.TAU_AMPLITUDE
        * np.exp(WPrimeConstants.TAU_RATE * (cp - below_cp_mean))
        + WPrimeConstants.TAU_OFFSET
    )
    return int(tau)


class ThresholdExtractor:
    """Derives the model parameters and the excess power array."""

    def __init__(self, settings: Settings):
        """
        Initialize the extractor.

        Args:
            settings: Application settings providing the fallback CP
        """
        self.settings = settings

    def lookup(
        self, activity_date: date | None, zone_provider: ZoneProvider | None
    ) -> tuple[float, float]:
        """
        Look up CP and W' for the activity date.

        Returns:
            (cp, w_prime); the default CP and no W' without a provider,
            (0, 0) when no range covers the date
        """
        if zone_provider is None:
            logger.warning(
                f"No zone configuration, using default CP {self.settings.default_cp}W"
            )
            return self.settings.default_cp, 0.0

        zone_range = zone_provider.which_range(activity_date) if activity_date else -1
        if zone_range < 0:
            logger.warning(f"No CP/W' range configured for {activity_date}")
            return 0.0, 0.0

        return (
            float(zone_provider.get_cp(zone_range)),
            float(zone_provider.get_wprime(zone_range)),
        )

    def derive(
        self,
        series: np.ndarray,
        activity_date: date | None,
        zone_provider: ZoneProvider | None,
    ) -> tuple[Thresholds, np.ndarray]:
        """
        Derive thresholds and excess power for a dense series.

        Args:
            series: Dense 1 second power series
            activity_date: Date used to pick the zone range
            zone_provider: Source of CP/W', or None if there is none at all

        Returns:
            Tuple of (Thresholds, excess power above CP per second)
        """
        cp, w_prime = self.lookup(activity_date, zone_provider)

        excess = excess_power(series, cp)
        below_cp_mean = below_cp_average(series, cp)
        tau = calculate_tau(cp, below_cp_mean)

        logger.debug(
            f"CP={cp:.0f}W W'={w_prime:.0f}J below CP mean={below_cp_mean:.1f}W "
            f"TAU={tau}s"
        )
        thresholds = Thresholds(
            cp=cp, w_prime=w_prime, tau=tau, below_cp_mean=below_cp_mean
        )
        return thresholds, excess


def excess_power(series: np.ndarray, cp: float) -> np.ndarray:
    """Return power above CP, zero where the athlete is at or below CP."""
    return np.maximum(series - cp, 0.0)


def below_cp_average(series: np.ndarray, cp: float) -> float:
    """Mean power of the seconds spent below CP, 0 if there are none."""
    below = series[series < cp]
    if below.size == 0:
        return 0.0
    return float(below.mean())
