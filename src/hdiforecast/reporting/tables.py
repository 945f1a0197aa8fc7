"""src/hdiforecast/reporting/tables.py"""

from __future__ import annotations

from typing import Mapping

import pandas as pd

from hdiforecast.forecasting.forecast import ForecastResult


METRICS_COLUMNS = [
    "Model", "Alpha", "Beta", "Phi", "Estimated", "N_Fitted", "SSE", "MSE", "RMSE", "MAE", "MAPE",
]


def make_metrics_table(results: Mapping[str, ForecastResult]) -> pd.DataFrame:
    """
    One row per model:
        Model, Alpha, Beta, Phi, Estimated, N_Fitted, SSE, MSE, RMSE, MAE, MAPE
    sorted by RMSE (best first).
    """
    if not results:
        return pd.DataFrame(columns=METRICS_COLUMNS)
    rows = [r.metrics_row() for r in results.values()]
    return pd.DataFrame(rows)[METRICS_COLUMNS].sort_values("RMSE", kind="stable").reset_index(drop=True)


def make_forecast_table(results: Mapping[str, ForecastResult]) -> pd.DataFrame:
    """Long format: Year, Model, Forecast (+ interval columns when present)."""
    if not results:
        return pd.DataFrame(columns=["Year", "Model", "Forecast"])
    frames = [r.to_frame() for r in results.values()]
    return pd.concat(frames, ignore_index=True).sort_values(["Model", "Year"]).reset_index(drop=True)


def make_forecast_wide_table(results: Mapping[str, ForecastResult]) -> pd.DataFrame:
    """Wide format for side-by-side reading: Year, <model_1>, <model_2>, ..."""
    long = make_forecast_table(results)
    if long.empty:
        return pd.DataFrame(columns=["Year"])
    wide = long.pivot(index="Year", columns="Model", values="Forecast").reset_index()
    wide.columns.name = None
    return wide


def make_fitted_table(results: Mapping[str, ForecastResult]) -> pd.DataFrame:
    """In-sample Year, Actual, Fitted, Residual, Level, Trend, Model for every model."""
    if not results:
        return pd.DataFrame(columns=["Year", "Actual", "Fitted", "Residual", "Level", "Trend", "Model"])
    frames = [r.model.to_frame() for r in results.values()]
    return pd.concat(frames, ignore_index=True)
