"""
Metric calculation modules.

This package contains the stages of the W' balance model:
- thresholds: CP/W' lookup, excess power and TAU
- depletion: decay convolution producing the W' balance series
- matches: smoothing and match detection
- base: metric base class and the metric catalogue
"""

from .base import MetricCatalogue, RideMetric
from .depletion import DecayConvolution, time_axis
from .matches import MatchDetector, trailing_average
from .thresholds import (
    ThresholdExtractor,
    below_cp_average,
    calculate_tau,
    excess_power,
)

__all__ = [
    "DecayConvolution",
    "MatchDetector",
    "MetricCatalogue",
    "RideMetric",
    "ThresholdExtractor",
    "below_cp_average",
    "calculate_tau",
    "excess_power",
    "time_axis",
    "trailing_average",
]
