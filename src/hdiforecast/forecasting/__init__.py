"""src/hdiforecast/forecasting/__init__.py"""

from .forecast import ForecastResult, build_forecast, compare_models, forecast
from .intervals import IntervalResult, holt_prediction_intervals, normal_pi

__all__ = [
    "forecast",
    "build_forecast",
    "compare_models",
    "ForecastResult",
    "IntervalResult",
    "normal_pi",
    "holt_prediction_intervals",
]
