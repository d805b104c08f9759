"""
W' balance from excess power.

For every second i the balance is W' minus the excess power of the trailing
decay period, each second weighted by how long ago it happened:

    balance[i] = W' - sum(excess[i - j] * e^(-j / TAU)), 0 <= j < min(1200, i)

The sum is a causal convolution with an exponential kernel, so it is computed
with numpy in one pass instead of re-summing the window every second.
"""

import logging

import numpy as np

from ..constants import TimeConstants, WPrimeConstants
from ..exceptions import CalculationError
from ..models import DepletionSeries

logger = logging.getLogger(__name__)


class DecayConvolution:
    """Computes the W' balance series."""

    def __init__(self, decay_period: int = WPrimeConstants.DECAY_PERIOD):
        """
        Initialize the engine.

        Args:
            decay_period: Length of the trailing window in seconds
        """
        if decay_period <= 0:
            raise CalculationError(f"Decay period must be positive: {decay_period}")
        self.decay_period = decay_period

    def kernel(self, tau: int) -> np.ndarray:
        """Decay weights for 0..decay_period-1 seconds ago."""
        j = np.arange(self.decay_period, dtype=float)
        return np.exp(-j / tau) * WPrimeConstants.MULT_CONST

    def compute(self, excess: np.ndarray, w_prime: float, tau: int) -> DepletionSeries:
        """
        Compute the balance for every second.

        Args:
            excess: Power above CP per second
            w_prime: Initial W' in joules
            tau: Reconstitution time constant in seconds

        Returns:
            DepletionSeries with min_y/max_y seeded at zero

        Raises:
            CalculationError: If tau is not positive
        """
        n = len(excess)
        if n == 0:
            return DepletionSeries(values=np.zeros(0))
        if tau <= 0:
            raise CalculationError(f"TAU must be positive, got {tau}")

        # the first second never contributes, the window always stops at i - j > 0
        contributing = np.asarray(excess, dtype=float).copy()
        contributing[0] = 0.0

        expended = np.convolve(contributing, self.kernel(tau))[:n]
        values = w_prime - expended

        min_y = min(0.0, float(values.min()))
        max_y = max(0.0, float(values.max()))
        logger.debug(f"W' balance over {n}s: min {min_y:.0f}J, max {max_y:.0f}J")

        return DepletionSeries(values=values, min_y=min_y, max_y=max_y)


def time_axis(length: int) -> np.ndarray:
    """Minutes since the start for each second, as used by the W' chart."""
    return np.arange(length, dtype=float) / TimeConstants.SECONDS_PER_MINUTE
