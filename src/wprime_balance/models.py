"""
Data models for the W' balance package.

Parameters and results are Pydantic models; the per-second series are numpy
arrays carried by plain dataclasses.
"""

from dataclasses import dataclass, field
from datetime import date

import numpy as np
from pandas import DataFrame
from pydantic import BaseModel, ConfigDict, Field, model_validator


class ZoneRange(BaseModel):
    """CP and W' valid for a range of dates."""

    start_date: date = Field(..., description="First day the range applies")
    end_date: date | None = Field(
        None, description="First day the range no longer applies (open if None)"
    )
    cp: float = Field(..., ge=0, description="Critical Power in watts")
    w_prime: float = Field(0.0, ge=0, description="W' (W prime) in joules")

    @model_validator(mode="after")
    def check_dates(self) -> "ZoneRange":
        """Validate that the range does not end before it starts."""
        if self.end_date is not None and self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


class Thresholds(BaseModel):
    """Model parameters derived once per computation."""

    cp: float = Field(0.0, description="Critical Power in watts")
    w_prime: float = Field(0.0, description="W' in joules")
    tau: int = Field(0, description="Reconstitution time constant in seconds")
    below_cp_mean: float = Field(
        0.0, description="Mean power of the seconds spent below CP"
    )


class Match(BaseModel):
    """An above-CP effort that spent a meaningful amount of W'."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0, description="First second of the match")
    stop: int = Field(..., description="Last second of the match")
    secs: int = Field(..., description="Duration in seconds, stop - start + 1")
    cost: float = Field(..., description="W' spent in joules")

    @model_validator(mode="after")
    def check_bounds(self) -> "Match":
        """Validate that the match ends after it starts."""
        if self.stop <= self.start:
            raise ValueError("stop must be after start")
        return self

    @property
    def duration_seconds(self) -> int:
        """Alias for the match duration."""
        return self.secs


class MatchMarkers(BaseModel):
    """Chart points at the start and stop of the larger matches."""

    x: list[float] = Field(default_factory=list, description="Minutes")
    y: list[float] = Field(default_factory=list, description="W' balance in joules")


@dataclass
class DepletionSeries:
    """W' balance per second with the running extremes used for plot scaling."""

    values: np.ndarray
    min_y: float = 0.0
    max_y: float = 0.0

    def __len__(self) -> int:
        return len(self.values)


@dataclass
class WPrimeResult:
    """Everything one W' computation exposes to its caller."""

    thresholds: Thresholds = field(default_factory=Thresholds)
    values: np.ndarray = field(default_factory=lambda: np.zeros(0))
    xvalues: np.ndarray = field(default_factory=lambda: np.zeros(0))
    min_y: float = 0.0
    max_y: float = 0.0
    matches: list[Match] = field(default_factory=list)
    markers: MatchMarkers = field(default_factory=MatchMarkers)

    @property
    def is_empty(self) -> bool:
        """True when the activity had no usable power data."""
        return len(self.values) == 0

    @property
    def cp(self) -> float:
        return self.thresholds.cp

    @property
    def w_prime(self) -> float:
        return self.thresholds.w_prime

    @property
    def tau(self) -> int:
        return self.thresholds.tau


# PowerStream is a typed alias for a pandas DataFrame with a "time" column in
# seconds and an optional "watts" column.
PowerStream = DataFrame
