"""
Data access and preparation layer.

This package contains modules for loading power streams and resampling them
to a dense 1 second series.
"""

from .loader import StreamLoader
from .resampler import Resampler, has_power_data

__all__ = [
    "Resampler",
    "StreamLoader",
    "has_power_data",
]
