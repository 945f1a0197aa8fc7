"""src/hdiforecast/modeling/evaluation.py"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from hdiforecast.common.errors import DivisionByZero, InsufficientData
from hdiforecast.modeling.holt import FittedModel


def _to_arrays(y_true: Iterable[float], y_pred: Iterable[float]) -> tuple[np.ndarray, np.ndarray]:
    yt = np.asarray(list(y_true), dtype=float)
    yp = np.asarray(list(y_pred), dtype=float)
    if yt.shape != yp.shape:
        raise ValueError(f"y_true/y_pred shape mismatch: {yt.shape} vs {yp.shape}")
    return yt, yp


def sse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    return float(np.sum((y_true - y_pred) ** 2))


def mae(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    if y_true.size == 0:
        return float("nan")
    return float(np.mean(np.abs(y_true - y_pred)))


def mape(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """Mean absolute percentage error, in percent."""
    if y_true.size == 0:
        return float("nan")
    zeros = np.flatnonzero(y_true == 0.0)
    if zeros.size:
        raise DivisionByZero(f"MAPE undefined: actual value is 0 at positions {zeros.tolist()}")
    return float(100.0 / y_true.size * np.sum(np.abs(y_true - y_pred) / np.abs(y_true)))


@dataclass(frozen=True)
class AccuracyMetrics:
    sse: float
    mse: float
    rmse: float
    mae: float
    mape: float
    n: int

    def as_dict(self) -> dict[str, float]:
        # Keep stable column names for CSV exports
        return {
            "SSE": float(self.sse),
            "MSE": float(self.mse),
            "RMSE": float(self.rmse),
            "MAE": float(self.mae),
            "MAPE": float(self.mape),
        }


def compute_metrics(y_true: Iterable[float], y_pred: Iterable[float]) -> AccuracyMetrics:
    yt, yp = _to_arrays(y_true, y_pred)
    if yt.size == 0:
        raise InsufficientData("cannot compute accuracy on zero points")
    total = sse(yt, yp)
    mse = total / yt.size
    return AccuracyMetrics(
        sse=total,
        mse=mse,
        rmse=math.sqrt(mse),
        mae=mae(yt, yp),
        mape=mape(yt, yp),
        n=int(yt.size),
    )


def accuracy(model: FittedModel) -> AccuracyMetrics:
    """In-sample accuracy over the fitted periods (t = 2..n)."""
    return compute_metrics(model.actuals, model.fitted)
