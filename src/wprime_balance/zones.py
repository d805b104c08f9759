"""
CP and W' lookup by activity date.

The computation only depends on the ZoneProvider protocol; ZoneConfiguration is
the implementation backed by the dated ranges in the settings.
"""

import logging
from datetime import date, datetime
from typing import Protocol

from .exceptions import ConfigurationError
from .models import ZoneRange
from .settings import Settings

logger = logging.getLogger(__name__)


class ZoneProvider(Protocol):
    """Protocol for anything that knows an athlete's CP and W' over time."""

    def which_range(self, activity_date: date) -> int:
        """Return the index of the range covering the date, or -1."""
        ...

    def get_cp(self, range_index: int) -> float:
        """Return CP in watts for a range."""
        ...

    def get_wprime(self, range_index: int) -> float:
        """Return W' in joules for a range."""
        ...


class ZoneConfiguration:
    """
    Dated CP/W' ranges.

    Ranges are kept sorted by start date. A range without an end date runs
    until the next range starts, the last one indefinitely.
    """

    def __init__(self, ranges: list[ZoneRange]):
        """
        Initialize from a list of ranges.

        Args:
            ranges: Zone ranges in any order

        Raises:
            ConfigurationError: If two ranges start on the same day
        """
        self.ranges = sorted(ranges, key=lambda r: r.start_date)

        starts = [r.start_date for r in self.ranges]
        if len(set(starts)) != len(starts):
            raise ConfigurationError("Zone ranges must have distinct start dates")

    @classmethod
    def from_settings(cls, settings: Settings) -> "ZoneConfiguration | None":
        """Build the configuration, or None when no ranges are configured."""
        if not settings.zone_ranges:
            return None
        return cls(settings.zone_ranges)

    def which_range(self, activity_date: date) -> int:
        if isinstance(activity_date, datetime):
            activity_date = activity_date.date()

        for index, zone_range in enumerate(self.ranges):
            end = self._effective_end(index)
            if activity_date >= zone_range.start_date and (
                end is None or activity_date < end
            ):
                return index

        logger.debug(f"No zone range covers {activity_date}")
        return -1

    def get_cp(self, range_index: int) -> float:
        return self.ranges[range_index].cp

    def get_wprime(self, range_index: int) -> float:
        return self.ranges[range_index].w_prime

    def _effective_end(self, index: int) -> date | None:
        end = self.ranges[index].end_date
        if end is None and index + 1 < len(self.ranges):
            return self.ranges[index + 1].start_date
        return end

    def __len__(self) -> int:
        return len(self.ranges)
