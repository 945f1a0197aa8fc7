"""src/hdiforecast/validation/__init__.py"""

from __future__ import annotations

from .checks import CheckResult, validate_df, validate_series_canonical
from .schemas import (
    FITTED_OUTPUT,
    FORECAST_OUTPUT,
    METRICS_OUTPUT,
    SERIES_CANONICAL,
    SchemaSpec,
    assert_schema,
)

__all__ = [
    # checks
    "CheckResult",
    "validate_df",
    "validate_series_canonical",
    # schemas
    "SchemaSpec",
    "assert_schema",
    "SERIES_CANONICAL",
    "FITTED_OUTPUT",
    "FORECAST_OUTPUT",
    "METRICS_OUTPUT",
]
