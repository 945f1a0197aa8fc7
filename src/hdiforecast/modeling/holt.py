"""
src/hdiforecast/modeling/holt.py

Holt's linear trend method and its damped variant.

State is seeded from the first two observations:
    level_1 = y_1
    trend_1 = y_2 - y_1

and updated for t = 2..n with

    yhat_t  = level_{t-1} + phi * trend_{t-1}
    level_t = alpha * y_t + (1 - alpha) * (level_{t-1} + phi * trend_{t-1})
    trend_t = beta * (level_t - level_{t-1}) + (1 - beta) * phi * trend_{t-1}

Standard Holt is the same recurrence with phi fixed at 1.0. Parameters that
are not supplied are estimated by minimising the in-sample SSE with a
bounded Nelder-Mead search started from 0.5.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, NamedTuple

import numpy as np
import pandas as pd
from scipy import optimize

from hdiforecast.common.errors import InsufficientData, InvalidParameter, OptimizationDidNotConverge
from hdiforecast.modeling.series import TimeSeries, as_series


logger = logging.getLogger(__name__)

MODEL_HOLT = "holt"
MODEL_DAMPED_HOLT = "damped_holt"
MODEL_KINDS = (MODEL_HOLT, MODEL_DAMPED_HOLT)

MIN_OBSERVATIONS = 3
PARAM_BOUNDS = (1e-4, 1.0 - 1e-4)
START_VALUE = 0.5
DEFAULT_MAXITER = 1000


@dataclass(frozen=True)
class HoltParams:
    alpha: float
    beta: float
    phi: float = 1.0

    def as_dict(self) -> dict[str, float]:
        return {"alpha": float(self.alpha), "beta": float(self.beta), "phi": float(self.phi)}


class _SmoothingPath(NamedTuple):
    levels: np.ndarray
    trends: np.ndarray
    fitted: np.ndarray


def _readonly(a: np.ndarray) -> np.ndarray:
    a = np.array(a, dtype=float, copy=True)
    a.flags.writeable = False
    return a


def check_horizon(horizon: Any) -> int:
    """Horizon must be an integer >= 1."""
    if isinstance(horizon, bool) or not isinstance(horizon, (int, np.integer)):
        raise InvalidParameter(f"horizon must be an integer >= 1, got {horizon!r}")
    if int(horizon) < 1:
        raise InvalidParameter(f"horizon must be >= 1, got {horizon}")
    return int(horizon)


def trend_multipliers(phi: float, horizon: int, *, damped: bool) -> np.ndarray:
    """
    Multipliers applied to the final trend for steps 1..horizon.

    Linear (h) for standard Holt, phi + phi^2 + ... + phi^h for damped Holt.
    """
    steps = np.arange(1, int(horizon) + 1, dtype=float)
    if not damped:
        return steps
    return np.cumsum(float(phi) ** steps)


@dataclass(frozen=True, eq=False)
class FittedModel:
    """
    Result of one fitting call.

    levels/trends hold the state for every observed period; fitted holds
    the one-step-ahead values for periods[1:].
    """
    kind: str
    params: HoltParams
    series: TimeSeries
    levels: np.ndarray
    trends: np.ndarray
    fitted: np.ndarray
    estimated: tuple[str, ...] = ()

    @property
    def damped(self) -> bool:
        return self.kind == MODEL_DAMPED_HOLT

    @property
    def level(self) -> float:
        return float(self.levels[-1])

    @property
    def trend(self) -> float:
        return float(self.trends[-1])

    @property
    def fitted_periods(self) -> np.ndarray:
        return self.series.periods[1:]

    @property
    def actuals(self) -> np.ndarray:
        return self.series.values[1:]

    @property
    def residuals(self) -> np.ndarray:
        return self.actuals - self.fitted

    @property
    def n_fitted(self) -> int:
        return int(self.fitted.size)

    @property
    def sse(self) -> float:
        return float(np.sum(self.residuals ** 2))

    def predict(self, steps: int) -> np.ndarray:
        steps = check_horizon(steps)
        mult = trend_multipliers(self.params.phi, steps, damped=self.damped)
        return self.level + mult * self.trend

    def to_frame(self) -> pd.DataFrame:
        fitted = np.concatenate([[np.nan], self.fitted])
        return pd.DataFrame(
            {
                "Year": self.series.periods.astype(int),
                "Actual": self.series.values.astype(float),
                "Fitted": fitted,
                "Residual": self.series.values - fitted,
                "Level": self.levels,
                "Trend": self.trends,
                "Model": self.kind,
            }
        )


def _smooth(y: np.ndarray, alpha: float, beta: float, phi: float) -> _SmoothingPath:
    n = y.size
    levels = np.empty(n, dtype=float)
    trends = np.empty(n, dtype=float)
    fitted = np.empty(n - 1, dtype=float)

    levels[0] = y[0]
    trends[0] = y[1] - y[0]

    for t in range(1, n):
        damped_trend = phi * trends[t - 1]
        fitted[t - 1] = levels[t - 1] + damped_trend
        levels[t] = alpha * y[t] + (1.0 - alpha) * (levels[t - 1] + damped_trend)
        trends[t] = beta * (levels[t] - levels[t - 1]) + (1.0 - beta) * damped_trend

    return _SmoothingPath(levels=levels, trends=trends, fitted=fitted)


def _sse(free_values: np.ndarray, y: np.ndarray, fixed: dict[str, float], free: tuple[str, ...]) -> float:
    params = dict(fixed)
    params.update(zip(free, (float(v) for v in free_values)))
    path = _smooth(y, params["alpha"], params["beta"], params["phi"])
    return float(np.sum((y[1:] - path.fitted) ** 2))


def _validate_param(name: str, value: float | None) -> float | None:
    if value is None:
        return None
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameter(f"{name} must be a number in (0, 1], got {value!r}") from e
    if not math.isfinite(v) or not (0.0 < v <= 1.0):
        raise InvalidParameter(f"{name} must be in (0, 1], got {value!r}")
    return v


def _estimate(
    y: np.ndarray,
    fixed: dict[str, float],
    free: tuple[str, ...],
    *,
    maxiter: int,
) -> dict[str, float]:
    """Minimise in-sample SSE over the free parameters."""
    x0 = np.full(len(free), START_VALUE, dtype=float)
    res = optimize.minimize(
        _sse,
        x0,
        args=(y, fixed, free),
        method="Nelder-Mead",
        bounds=[PARAM_BOUNDS] * len(free),
        options={"maxiter": int(maxiter), "maxfev": 4 * int(maxiter), "xatol": 1e-6, "fatol": 1e-10},
    )
    if not res.success:
        raise OptimizationDidNotConverge(
            f"parameter search for {list(free)} stopped after {res.nit} iterations: {res.message}"
        )
    return {name: float(v) for name, v in zip(free, res.x)}


def _fit(
    series: Any,
    *,
    kind: str,
    alpha: float | None,
    beta: float | None,
    phi: float | None,
    maxiter: int,
) -> FittedModel:
    s = as_series(series)
    if len(s) < MIN_OBSERVATIONS:
        raise InsufficientData(
            f"{kind} needs at least {MIN_OBSERVATIONS} observations, got {len(s)}"
        )

    supplied = {
        "alpha": _validate_param("alpha", alpha),
        "beta": _validate_param("beta", beta),
        "phi": _validate_param("phi", phi) if kind == MODEL_DAMPED_HOLT else 1.0,
    }
    fixed = {k: v for k, v in supplied.items() if v is not None}
    free = tuple(k for k, v in supplied.items() if v is None)

    y = s.values
    values = dict(fixed)
    if free:
        values.update(_estimate(y, fixed, free, maxiter=maxiter))
        logger.debug("%s estimated %s", kind, {k: round(values[k], 6) for k in free})

    params = HoltParams(alpha=values["alpha"], beta=values["beta"], phi=values["phi"])
    path = _smooth(y, params.alpha, params.beta, params.phi)

    return FittedModel(
        kind=kind,
        params=params,
        series=s,
        levels=_readonly(path.levels),
        trends=_readonly(path.trends),
        fitted=_readonly(path.fitted),
        estimated=free,
    )


def fit_holt(
    series: Any,
    alpha: float | None = None,
    beta: float | None = None,
    *,
    maxiter: int = DEFAULT_MAXITER,
) -> FittedModel:
    """Fit standard (undamped) Holt; missing alpha/beta are estimated."""
    return _fit(series, kind=MODEL_HOLT, alpha=alpha, beta=beta, phi=None, maxiter=maxiter)


def fit_damped_holt(
    series: Any,
    alpha: float | None = None,
    beta: float | None = None,
    phi: float | None = None,
    *,
    maxiter: int = DEFAULT_MAXITER,
) -> FittedModel:
    """Fit damped Holt; missing alpha/beta/phi are estimated."""
    return _fit(series, kind=MODEL_DAMPED_HOLT, alpha=alpha, beta=beta, phi=phi, maxiter=maxiter)


def fit_model(kind: str, series: Any, *, maxiter: int = DEFAULT_MAXITER, **params: float | None) -> FittedModel:
    """Dispatch by model name ("holt" | "damped_holt")."""
    k = str(kind).strip().lower()
    if k == MODEL_HOLT:
        if params.get("phi") is not None:
            raise InvalidParameter("phi is only valid for damped_holt")
        return fit_holt(series, params.get("alpha"), params.get("beta"), maxiter=maxiter)
    if k == MODEL_DAMPED_HOLT:
        return fit_damped_holt(series, params.get("alpha"), params.get("beta"), params.get("phi"), maxiter=maxiter)
    raise InvalidParameter(f"unknown model {kind!r}; expected one of {list(MODEL_KINDS)}")
