"""
Metrics derived from the W' balance.

- Minimum W': lowest W' balance reached, in kJ
- WPrimeCalculator: flat dictionary of W' metrics for one activity
"""

import logging
from datetime import date

import pandas as pd

from ..constants import MetricSymbols
from ..metrics.base import MetricCatalogue, RideMetric
from ..settings import Settings
from ..zones import ZoneProvider
from .wprime import WPrime

logger = logging.getLogger(__name__)


class MinWPrime(RideMetric):
    """Lowest W' balance of the activity in kJ."""

    symbol = MetricSymbols.MIN_WPRIME
    name = "Minimum W'"
    metric_type = "low"
    units = "kJ"
    precision = 1
    can_aggregate = False

    def compute(
        self,
        stream_df: pd.DataFrame,
        activity_date: date | None = None,
        zone_provider: ZoneProvider | None = None,
        recording_interval: int | None = None,
    ) -> float:
        # fresh model per activity, nothing carries over between rides
        result = WPrime(self.settings).compute(
            stream_df,
            recording_interval=recording_interval,
            activity_date=activity_date,
            zone_provider=zone_provider,
        )
        if result.is_empty:
            return 0.0
        return self._round(result.values.min() / 1000.0)


def register_wprime_metrics(catalogue: MetricCatalogue, settings: Settings) -> None:
    """Add the W' metrics to a catalogue."""
    catalogue.register(MinWPrime(settings))


class WPrimeCalculator:
    """Calculates W' balance metrics from activity stream data."""

    def __init__(self, settings: Settings):
        """
        Initialize calculator.

        Args:
            settings: Application settings
        """
        self.settings = settings
        self.model = WPrime(settings)

    def calculate(
        self,
        stream_df: pd.DataFrame,
        activity_date: date | None = None,
        zone_provider: ZoneProvider | None = None,
    ) -> dict[str, float]:
        """
        Calculate all W' metrics.

        Args:
            stream_df: DataFrame containing activity stream data
            activity_date: Date used to look up CP and W'
            zone_provider: Source of CP/W'

        Returns:
            Dictionary of W' metrics, zeros when there is no power data
        """
        result = self.model.compute(
            stream_df, activity_date=activity_date, zone_provider=zone_provider
        )
        if result.is_empty:
            return self._get_empty_metrics()

        return {
            "w_prime_balance_min": round(float(result.values.min()) / 1000.0, 1),
            "match_count": float(len(result.matches)),
            "match_cost_total": float(sum(m.cost for m in result.matches)),
            "match_time_total": float(sum(m.secs for m in result.matches)),
            "cp": result.cp,
            "w_prime": result.w_prime,
            "tau": float(result.tau),
        }

    def _get_empty_metrics(self) -> dict[str, float]:
        """Return dict of zero-valued metrics when no valid data."""
        return {
            "w_prime_balance_min": 0.0,
            "match_count": 0.0,
            "match_cost_total": 0.0,
            "match_time_total": 0.0,
            "cp": 0.0,
            "w_prime": 0.0,
            "tau": 0.0,
        }
