"""
Analysis layer.

This package contains the W' balance computation that ties the data and
metric stages together, and the metrics derived from its result.
"""

from .wprime import WPrime, WPrimeWorkspace
from .wprime_metrics import MinWPrime, WPrimeCalculator, register_wprime_metrics

__all__ = [
    "MinWPrime",
    "WPrime",
    "WPrimeCalculator",
    "WPrimeWorkspace",
    "register_wprime_metrics",
]
