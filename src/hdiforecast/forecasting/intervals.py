"""src/hdiforecast/forecasting/intervals.py"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np
import pandas as pd
from scipy import stats

from hdiforecast.common.errors import InvalidParameter
from hdiforecast.modeling.holt import FittedModel, check_horizon, trend_multipliers


@dataclass(frozen=True, eq=False)
class IntervalResult:
    """
    Standard output for forecasts with uncertainty.

    forecast: point forecast
    lower: lower prediction interval
    upper: upper prediction interval
    level: e.g. 0.8, 0.95
    kind: "pi" (prediction interval) or "ci" (confidence interval)
    """
    forecast: np.ndarray
    lower: np.ndarray
    upper: np.ndarray
    level: float
    kind: str = "pi"

    def to_frame(self, years: Iterable[int], value_col: str) -> pd.DataFrame:
        years = list(years)
        pct = int(round(self.level * 100))
        return pd.DataFrame(
            {
                "Year": years,
                value_col: self.forecast.astype(float),
                f"{value_col}_Lower_{pct}": self.lower.astype(float),
                f"{value_col}_Upper_{pct}": self.upper.astype(float),
                "Interval_Kind": self.kind,
                "Interval_Level": float(self.level),
            }
        )


def z_from_level(level: float) -> float:
    """Two-sided normal quantile: 0.80 -> 1.2816, 0.95 -> 1.9600."""
    lv = float(level)
    if not math.isfinite(lv) or not (0.0 < lv < 1.0):
        raise InvalidParameter(f"interval level must be in (0, 1), got {level!r}")
    return float(stats.norm.ppf(0.5 + lv / 2.0))


def normal_pi(yhat: np.ndarray, sigma: float | np.ndarray, level: float = 0.95) -> IntervalResult:
    """
    Prediction interval assuming Normal errors with std = sigma
    (scalar, or one value per step).
    """
    yhat = np.asarray(yhat, dtype=float)
    z = z_from_level(level)
    half = z * np.asarray(sigma, dtype=float)
    return IntervalResult(forecast=yhat, lower=yhat - half, upper=yhat + half, level=float(level), kind="pi")


def forecast_variance_factors(model: FittedModel, horizon: int) -> np.ndarray:
    """
    Multipliers k_h with var_h = sigma^2 * k_h for h = 1..horizon:

        k_h = 1 + sum_{j=1}^{h-1} c_j^2,   c_j = alpha * (1 + beta * Phi_j)

    where Phi_j = j for standard Holt and phi + ... + phi^j when damped.
    """
    horizon = check_horizon(horizon)
    p = model.params
    if horizon == 1:
        return np.ones(1, dtype=float)
    phi_j = trend_multipliers(p.phi, horizon - 1, damped=model.damped)
    c = p.alpha * (1.0 + p.beta * phi_j)
    return 1.0 + np.concatenate([[0.0], np.cumsum(c ** 2)])


def holt_prediction_intervals(model: FittedModel, horizon: int, level: float = 0.95) -> IntervalResult:
    """Normal prediction intervals using sigma^2 = SSE / n_fitted."""
    horizon = check_horizon(horizon)
    sigma2 = model.sse / model.n_fitted
    sd = np.sqrt(sigma2 * forecast_variance_factors(model, horizon))
    return normal_pi(model.predict(horizon), sigma=sd, level=level)
