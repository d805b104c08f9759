"""
Custom exceptions for the W' balance package.

Degenerate activity data (no power, no zone range, empty streams) is not an
error and never raises; these exceptions cover invalid inputs, configuration
and I/O problems.
"""


class WPrimeBalanceError(Exception):
    """Base exception for all W' balance errors."""


class ConfigurationError(WPrimeBalanceError):
    """Raised when there is an issue with configuration settings."""


class ValidationError(WPrimeBalanceError):
    """Raised when data validation fails."""


class InvalidDataError(ValidationError):
    """Raised when input data is invalid or missing required fields."""


class CalculationError(WPrimeBalanceError):
    """Raised when there is an error during a computation."""


class MetricCalculationError(CalculationError):
    """Raised when a metric cannot be computed or aggregated."""


class DataLoadError(WPrimeBalanceError):
    """Raised when there is an error loading stream files."""
