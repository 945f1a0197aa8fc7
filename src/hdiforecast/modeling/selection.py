"""src/hdiforecast/modeling/selection.py"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal


PrimaryMetric = Literal["sse", "mse", "rmse", "mae", "mape"]

METRIC_KEYS = {"sse": "SSE", "mse": "MSE", "rmse": "RMSE", "mae": "MAE", "mape": "MAPE"}


@dataclass(frozen=True)
class SelectionResult:
    best_model: str
    metric: str
    best_row: dict

    def to_dict(self) -> dict:
        return {"Best_Model": self.best_model, "Metric": self.metric, **self.best_row}


def pick_best_model(rows: list[dict], *, primary: PrimaryMetric | str = "rmse") -> SelectionResult:
    """
    rows: list of dicts containing:
      - "Model"
      - upper-case metric columns ("SSE", "MSE", "RMSE", "MAE", "MAPE")

    primary is matched case-insensitively. Rows whose metric is missing or
    non-finite are ignored; ties keep the first row.
    """
    if not rows:
        raise ValueError("No model rows to select from.")

    p = str(primary).strip().lower()
    if p not in METRIC_KEYS:
        raise ValueError(f"Unknown metric {primary!r}; expected one of {sorted(METRIC_KEYS)}")
    metric_key = METRIC_KEYS[p]

    best_row = None
    best_val = float("inf")

    for r in rows:
        try:
            v = float(r.get(metric_key, float("nan")))
        except (TypeError, ValueError):
            continue
        if not math.isfinite(v):
            continue
        if v < best_val:
            best_val = v
            best_row = r

    if best_row is None:
        raise ValueError(f"All {metric_key} values are missing or NaN; cannot select a best model.")

    best_model = str(best_row.get("Model", "unknown")).strip()
    return SelectionResult(best_model=best_model, metric=metric_key, best_row=dict(best_row))
