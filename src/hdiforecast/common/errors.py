"""
src/hdiforecast/common/errors.py

Exceptions raised by the smoothing forecaster.

Every error subclasses ForecastError (itself a ValueError), so callers can
catch the whole family at once or a single precondition.
"""

from __future__ import annotations


class ForecastError(ValueError):
    """Base class for all hdiforecast failures."""


class InsufficientData(ForecastError):
    """Series too short to seed level/trend and fit at least one point."""


class InvalidParameter(ForecastError):
    """Smoothing parameter or horizon outside its admissible range."""


class NonFiniteValue(ForecastError):
    """Series contains NaN or +/-inf."""


class InvalidSeries(ForecastError):
    """Periods are not strictly increasing by a constant step."""


class DivisionByZero(ForecastError, ZeroDivisionError):
    """MAPE requested on a series with a zero actual value."""


class OptimizationDidNotConverge(ForecastError, RuntimeError):
    """Parameter search stopped without reporting success."""
