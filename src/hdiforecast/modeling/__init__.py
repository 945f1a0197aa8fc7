"""src/hdiforecast/modeling/__init__.py"""

from .evaluation import AccuracyMetrics, accuracy, compute_metrics
from .holt import (
    MODEL_DAMPED_HOLT,
    MODEL_HOLT,
    FittedModel,
    HoltParams,
    fit_damped_holt,
    fit_holt,
    fit_model,
)
from .selection import SelectionResult, pick_best_model
from .series import TimeSeries, as_series

__all__ = [
    "TimeSeries",
    "as_series",
    "HoltParams",
    "FittedModel",
    "MODEL_HOLT",
    "MODEL_DAMPED_HOLT",
    "fit_holt",
    "fit_damped_holt",
    "fit_model",
    "AccuracyMetrics",
    "accuracy",
    "compute_metrics",
    "SelectionResult",
    "pick_best_model",
]
