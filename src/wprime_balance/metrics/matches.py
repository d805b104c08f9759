"""
Match detection.

A match is an effort above CP that spent at least a minimum amount of W'.
Entry triggers on either the smoothed or the raw power reaching CP, exit needs
both to drop below it, and the end is then pulled back to the last raw second
still at CP so smoothing lag does not stretch the match.
"""

import logging

import numpy as np

from ..constants import MatchConstants
from ..models import Match, MatchMarkers

logger = logging.getLogger(__name__)


def trailing_average(raw: np.ndarray, window: int) -> np.ndarray:
    """
    Trailing moving average of the last `window` seconds.

    Evaluated backwards from the last second with a running sum. Seconds
    before `window` keep their raw value.
    """
    smoothed = np.array(raw, dtype=float, copy=True)
    last = len(smoothed) - 1
    if window <= 0 or last < window:
        return smoothed

    total = float(np.sum(raw[last - window + 1 : last + 1]))
    for i in range(last, window - 1, -1):
        smoothed[i] = total / window
        total -= raw[i]
        total += raw[i - window]

    return smoothed


class MatchDetector:
    """Finds matches in a dense power series."""

    def __init__(
        self,
        smoothing_window: int = MatchConstants.SMOOTHING_WINDOW,
        min_cost: float = MatchConstants.MIN_COST_JOULES,
        chart_min_cost: float = MatchConstants.CHART_MIN_COST_JOULES,
    ):
        """
        Initialize the detector.

        Args:
            smoothing_window: Trailing average window in seconds
            min_cost: Minimum W' cost in joules for a match to count
            chart_min_cost: Minimum cost for a match to be marked on the chart
        """
        self.smoothing_window = smoothing_window
        self.min_cost = min_cost
        self.chart_min_cost = chart_min_cost

    def detect(
        self, raw: np.ndarray, cp: float, depletion: np.ndarray
    ) -> list[Match]:
        """
        Scan the series for matches.

        Args:
            raw: Dense 1 second power series
            cp: Critical Power in watts
            depletion: W' balance series of the same length

        Returns:
            Matches in chronological order. A match still open at the end of
            the series is dropped.
        """
        smoothed = trailing_average(raw, self.smoothing_window)

        matches: list[Match] = []
        in_match = False
        start = 0

        for i in range(len(raw)):
            if not in_match and (smoothed[i] >= cp or raw[i] >= cp):
                in_match = True
                start = i

            if in_match and smoothed[i] < cp and raw[i] < cp:
                end = i - 1
                while end > start and raw[end] < cp:
                    end -= 1

                if end > start:
                    cost = float(depletion[start] - depletion[end])
                    if cost >= self.min_cost:
                        matches.append(
                            Match(start=start, stop=end, secs=end - start + 1, cost=cost)
                        )
                in_match = False

        if in_match:
            logger.debug(f"Discarding match still open at the end (from {start}s)")

        logger.debug(f"Found {len(matches)} matches")
        return matches

    def markers(
        self, matches: list[Match], depletion: np.ndarray, xvalues: np.ndarray
    ) -> MatchMarkers:
        """Start and stop points of the matches large enough to chart."""
        markers = MatchMarkers()
        for match in matches:
            if match.cost >= self.chart_min_cost:
                for index in (match.start, match.stop):
                    markers.x.append(float(xvalues[index]))
                    markers.y.append(float(depletion[index]))
        return markers
