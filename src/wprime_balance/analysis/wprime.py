"""
W' balance computation for a single activity.

Runs the resampling, threshold, decay convolution and match detection stages
in order and hands back a WPrimeResult. A WPrime instance keeps its scratch
arrays in a workspace between runs; it must not be shared by concurrent
callers.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import date

import numpy as np
import pandas as pd

from ..data import Resampler, has_power_data
from ..metrics.depletion import DecayConvolution, time_axis
from ..metrics.matches import MatchDetector
from ..metrics.thresholds import ThresholdExtractor
from ..models import Match, MatchMarkers, Thresholds, WPrimeResult
from ..settings import Settings
from ..zones import ZoneProvider

logger = logging.getLogger(__name__)


@dataclass
class WPrimeWorkspace:
    """Intermediate arrays of one computation."""

    series: np.ndarray = field(default_factory=lambda: np.zeros(0))
    excess: np.ndarray = field(default_factory=lambda: np.zeros(0))
    values: np.ndarray = field(default_factory=lambda: np.zeros(0))
    xvalues: np.ndarray = field(default_factory=lambda: np.zeros(0))
    thresholds: Thresholds = field(default_factory=Thresholds)
    min_y: float = 0.0
    max_y: float = 0.0
    matches: list[Match] = field(default_factory=list)
    markers: MatchMarkers = field(default_factory=MatchMarkers)

    def reset(self) -> None:
        """Forget everything from the previous run."""
        self.series = np.zeros(0)
        self.excess = np.zeros(0)
        self.values = np.zeros(0)
        self.xvalues = np.zeros(0)
        self.thresholds = Thresholds()
        self.min_y = self.max_y = 0.0
        self.matches = []
        self.markers = MatchMarkers()

    def to_result(self) -> WPrimeResult:
        return WPrimeResult(
            thresholds=self.thresholds.model_copy(),
            values=self.values.copy(),
            xvalues=self.xvalues.copy(),
            min_y=self.min_y,
            max_y=self.max_y,
            matches=list(self.matches),
            markers=self.markers.model_copy(deep=True),
        )


class WPrime:
    """
    Skiba W' balance model with match detection.

    Usage:
        wprime = WPrime(settings)
        result = wprime.compute(stream_df, activity_date=day, zone_provider=zones)
    """

    def __init__(self, settings: Settings | None = None):
        """
        Initialize the model.

        Args:
            settings: Application settings, defaults used if omitted
        """
        self.settings = settings or Settings()
        self.resampler = Resampler()
        self.extractor = ThresholdExtractor(self.settings)
        self.engine = DecayConvolution(self.settings.decay_period)
        self.detector = MatchDetector(
            smoothing_window=self.settings.match_smoothing,
            min_cost=self.settings.match_min_joules,
            chart_min_cost=self.settings.chart_match_min_joules,
        )
        self.workspace = WPrimeWorkspace()

    def compute(
        self,
        stream_df: pd.DataFrame | None,
        recording_interval: int | None = None,
        activity_date: date | None = None,
        zone_provider: ZoneProvider | None = None,
    ) -> WPrimeResult:
        """
        Compute W' balance and matches for one activity.

        Args:
            stream_df: DataFrame with 'time' and 'watts' columns
            recording_interval: Seconds between samples, settings default if None
            activity_date: Date used to look up CP and W'
            zone_provider: Source of CP/W', None if the athlete has no zones

        Returns:
            WPrimeResult; empty with all parameters at zero when the stream
            has no power data

        Raises:
            InvalidDataError: If the recording interval is not positive
        """
        ws = self.workspace
        ws.reset()

        interval = (
            self.settings.recording_interval
            if recording_interval is None
            else recording_interval
        )

        if not has_power_data(stream_df):
            logger.info("No power data, skipping W' computation")
            return ws.to_result()

        started = time.perf_counter()

        ws.series = self.resampler.resample(stream_df, interval)
        if ws.series.size == 0:
            return ws.to_result()

        ws.thresholds, ws.excess = self.extractor.derive(
            ws.series, activity_date, zone_provider
        )

        depletion = self.engine.compute(
            ws.excess, ws.thresholds.w_prime, ws.thresholds.tau
        )
        ws.values = depletion.values
        ws.min_y, ws.max_y = depletion.min_y, depletion.max_y
        ws.xvalues = time_axis(len(ws.values))

        ws.matches = self.detector.detect(ws.series, ws.thresholds.cp, ws.values)
        ws.markers = self.detector.markers(ws.matches, ws.values, ws.xvalues)

        logger.debug(
            f"W' computation over {len(ws.series)}s took "
            f"{(time.perf_counter() - started) * 1000:.1f}ms"
        )
        logger.info(
            f"W' balance: min {ws.min_y:.0f}J, {len(ws.matches)} matches "
            f"(CP={ws.thresholds.cp:.0f}W, W'={ws.thresholds.w_prime:.0f}J, "
            f"TAU={ws.thresholds.tau}s)"
        )
        return ws.to_result()
