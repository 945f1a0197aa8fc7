"""src/hdiforecast/__init__.py"""

from hdiforecast.common.errors import (
    DivisionByZero,
    ForecastError,
    InsufficientData,
    InvalidParameter,
    InvalidSeries,
    NonFiniteValue,
    OptimizationDidNotConverge,
)
from hdiforecast.forecasting.forecast import ForecastResult, build_forecast, compare_models, forecast
from hdiforecast.modeling.evaluation import AccuracyMetrics, accuracy
from hdiforecast.modeling.holt import FittedModel, HoltParams, fit_damped_holt, fit_holt
from hdiforecast.modeling.series import TimeSeries

__version__ = "0.1.0"

__all__ = [
    "TimeSeries",
    "HoltParams",
    "FittedModel",
    "fit_holt",
    "fit_damped_holt",
    "forecast",
    "accuracy",
    "AccuracyMetrics",
    "build_forecast",
    "compare_models",
    "ForecastResult",
    "ForecastError",
    "InsufficientData",
    "InvalidParameter",
    "InvalidSeries",
    "NonFiniteValue",
    "DivisionByZero",
    "OptimizationDidNotConverge",
]
