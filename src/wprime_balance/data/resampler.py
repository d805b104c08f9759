"""
Resampling of recorded power to a dense 1 second series.

Recording gaps are treated as zero output (sensor dropout), samples that do
not move time forward are dropped, and the remaining points are joined with a
natural cubic spline evaluated at every whole second.
"""

import logging

import numpy as np
import pandas as pd
from scipy.interpolate import CubicSpline

from ..constants import CSVConstants
from ..exceptions import InvalidDataError

logger = logging.getLogger(__name__)


def has_power_data(stream_df: pd.DataFrame | None) -> bool:
    """Return True if the stream has at least one usable power value."""
    if stream_df is None or stream_df.empty:
        return False
    if CSVConstants.POWER_COLUMN not in stream_df.columns:
        return False
    watts = pd.to_numeric(stream_df[CSVConstants.POWER_COLUMN], errors="coerce")
    return bool(watts.notna().any())


class Resampler:
    """Converts irregular (time, watts) samples to one value per second."""

    def resample(
        self, stream_df: pd.DataFrame | None, interval_seconds: int
    ) -> np.ndarray:
        """
        Build the dense series.

        Args:
            stream_df: DataFrame with 'time' (seconds) and 'watts' columns
            interval_seconds: Nominal recording interval used to detect gaps

        Returns:
            Array of length last accepted time + 1, empty if there is no power

        Raises:
            InvalidDataError: If the interval is not positive or 'time' is missing
        """
        if interval_seconds <= 0:
            raise InvalidDataError(
                f"Recording interval must be positive, got {interval_seconds}"
            )

        if not has_power_data(stream_df):
            return np.zeros(0)

        if CSVConstants.TIME_COLUMN not in stream_df.columns:
            raise InvalidDataError("Stream has power data but no 'time' column")

        times, watts = self._gap_filled_points(stream_df, interval_seconds)
        if len(times) == 0:
            return np.zeros(0)

        last = int(times[-1])
        seconds = np.arange(last + 1)

        if len(times) == 1:
            return np.full(last + 1, watts[0], dtype=float)

        spline = CubicSpline(times, watts, bc_type="natural")
        return spline(seconds)

    def _gap_filled_points(
        self, stream_df: pd.DataFrame, interval_seconds: int
    ) -> tuple[np.ndarray, np.ndarray]:
        """Return strictly increasing knot times and values, zeros in the gaps."""
        time = pd.to_numeric(stream_df[CSVConstants.TIME_COLUMN], errors="coerce")
        watts = pd.to_numeric(stream_df[CSVConstants.POWER_COLUMN], errors="coerce")
        valid = time.notna()
        time = time[valid].to_numpy(dtype=float)
        watts = watts[valid].fillna(0).to_numpy(dtype=float)

        times: list[float] = []
        values: list[float] = []
        rejected = 0
        filled = 0

        for t, w in zip(time, watts, strict=True):
            if times:
                previous = times[-1]
                if t <= previous:
                    # never go backwards, first sample at a time wins
                    rejected += 1
                    continue

                gap = previous + interval_seconds
                while gap < t:
                    times.append(gap)
                    values.append(0.0)
                    filled += 1
                    gap += interval_seconds

            times.append(t)
            values.append(w)

        logger.debug(
            f"Resampling {len(times) - filled} samples "
            f"({rejected} rejected, {filled} zero points filled)"
        )
        return np.asarray(times), np.asarray(values)
