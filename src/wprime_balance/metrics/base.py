"""
Base classes for ride metrics and the metric catalogue.

Metrics are not registered at import time. Whoever owns a MetricCatalogue
decides which metrics it holds by calling the registration functions
explicitly.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Literal

import pandas as pd

from ..exceptions import MetricCalculationError
from ..settings import Settings
from ..zones import ZoneProvider

logger = logging.getLogger(__name__)

MetricType = Literal["total", "average", "peak", "low"]


class RideMetric(ABC):
    """
    A single value computed from one activity.

    Subclasses set the descriptive class attributes and implement compute().
    """

    symbol: str = ""
    name: str = ""
    metric_type: MetricType = "total"
    units: str = ""
    precision: int = 0
    can_aggregate: bool = True

    def __init__(self, settings: Settings):
        """
        Initialize metric with settings.

        Args:
            settings: Application settings containing thresholds and configuration
        """
        self.settings = settings

    @abstractmethod
    def compute(
        self,
        stream_df: pd.DataFrame,
        activity_date: date | None = None,
        zone_provider: ZoneProvider | None = None,
        recording_interval: int | None = None,
    ) -> float:
        """
        Compute the metric for one activity.

        Args:
            stream_df: DataFrame containing the activity stream
            activity_date: Date of the activity
            zone_provider: Source of CP/W' for the athlete
            recording_interval: Seconds between samples

        Returns:
            Metric value rounded to the metric's precision
        """
        raise NotImplementedError("Subclasses must implement compute()")

    def _round(self, value: float) -> float:
        return round(float(value), self.precision)


class MetricCatalogue:
    """Registry of metrics by symbol."""

    def __init__(self):
        self._metrics: dict[str, RideMetric] = {}

    def register(self, metric: RideMetric) -> None:
        """
        Add a metric.

        Raises:
            MetricCalculationError: If the symbol is already registered
        """
        if metric.symbol in self._metrics:
            raise MetricCalculationError(f"Metric {metric.symbol} already registered")
        self._metrics[metric.symbol] = metric
        logger.debug(f"Registered metric {metric.symbol}")

    def get(self, symbol: str) -> RideMetric:
        try:
            return self._metrics[symbol]
        except KeyError as e:
            raise MetricCalculationError(f"Unknown metric: {symbol}") from e

    def symbols(self) -> list[str]:
        return list(self._metrics)

    def aggregate(self, symbol: str, values: list[float]) -> float:
        """
        Combine per-activity values of a metric.

        Totals are summed, averages averaged, peaks and lows take the extreme.

        Raises:
            MetricCalculationError: If the metric must be recomputed per activity
        """
        metric = self.get(symbol)
        if not metric.can_aggregate:
            raise MetricCalculationError(
                f"{metric.name} cannot be aggregated, compute it per activity"
            )
        if not values:
            return 0.0

        if metric.metric_type == "total":
            return float(sum(values))
        if metric.metric_type == "average":
            return float(sum(values) / len(values))
        if metric.metric_type == "peak":
            return float(max(values))
        return float(min(values))

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._metrics

    def __len__(self) -> int:
        return len(self._metrics)
