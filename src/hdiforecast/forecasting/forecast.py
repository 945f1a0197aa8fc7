"""src/hdiforecast/forecasting/forecast.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np
import pandas as pd

from hdiforecast.forecasting.intervals import IntervalResult, holt_prediction_intervals
from hdiforecast.modeling.evaluation import AccuracyMetrics, accuracy
from hdiforecast.modeling.holt import FittedModel, check_horizon, fit_model


logger = logging.getLogger(__name__)


def forecast(model: FittedModel, horizon: int) -> np.ndarray:
    """
    Point forecasts for the `horizon` periods after the last observation.

    Standard Holt extrapolates linearly (level + h * trend); damped Holt
    uses level + (phi + ... + phi^h) * trend.
    """
    return model.predict(check_horizon(horizon))


@dataclass(frozen=True, eq=False)
class ForecastResult:
    model: FittedModel
    periods: np.ndarray
    values: np.ndarray
    metrics: AccuracyMetrics
    intervals: IntervalResult | None = None

    @property
    def model_name(self) -> str:
        return self.model.kind

    def metrics_row(self) -> dict[str, Any]:
        return {
            "Model": self.model_name,
            **{k.capitalize(): v for k, v in self.model.params.as_dict().items()},
            "Estimated": ",".join(self.model.estimated),
            "N_Fitted": self.model.n_fitted,
            **self.metrics.as_dict(),
        }

    def to_frame(self, value_col: str = "Forecast") -> pd.DataFrame:
        base = pd.DataFrame(
            {
                "Year": self.periods.astype(int),
                "Model": self.model_name,
                value_col: self.values.astype(float),
            }
        )
        if self.intervals is None:
            return base
        iv = self.intervals.to_frame(self.periods, value_col).drop(columns=[value_col])
        return base.merge(iv, on="Year", how="left")


def build_forecast(
    model: FittedModel,
    horizon: int,
    *,
    interval_level: float | None = None,
) -> ForecastResult:
    """Forecast values, in-sample metrics and optional prediction intervals."""
    horizon = check_horizon(horizon)
    values = forecast(model, horizon)
    intervals = (
        holt_prediction_intervals(model, horizon, level=interval_level)
        if interval_level is not None
        else None
    )
    return ForecastResult(
        model=model,
        periods=model.series.future_periods(horizon),
        values=values,
        metrics=accuracy(model),
        intervals=intervals,
    )


def compare_models(
    series: Any,
    horizon: int,
    *,
    models: Iterable[str] = ("holt", "damped_holt"),
    params: dict[str, dict[str, float]] | None = None,
    interval_level: float | None = None,
    maxiter: int = 1000,
) -> dict[str, ForecastResult]:
    """Fit each named model on the same series and forecast it."""
    params = params or {}
    out: dict[str, ForecastResult] = {}
    for name in models:
        model = fit_model(name, series, maxiter=maxiter, **params.get(name, {}))
        out[model.kind] = build_forecast(model, horizon, interval_level=interval_level)
        logger.info(
            "Fitted %s params=%s RMSE=%.6f",
            model.kind,
            {k: round(v, 4) for k, v in model.params.as_dict().items()},
            out[model.kind].metrics.rmse,
        )
    return out
