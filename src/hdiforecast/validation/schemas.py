"""src/hdiforecast/validation/schemas.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import pandas as pd


@dataclass(frozen=True)
class SchemaSpec:
    """Minimal schema specification for a DataFrame."""
    name: str
    required_cols: tuple[str, ...]
    dtype_hints: dict[str, str] | None = None  # e.g. {"Year": "int", "Value": "float"}


def _missing_cols(df: pd.DataFrame, required: Iterable[str]) -> list[str]:
    return [c for c in required if c not in df.columns]


SERIES_CANONICAL = SchemaSpec(
    name="series_canonical",
    required_cols=("Year", "Value"),
    dtype_hints={"Year": "int", "Value": "float"},
)

FITTED_OUTPUT = SchemaSpec(
    name="fitted_output",
    required_cols=("Year", "Actual", "Fitted", "Residual", "Level", "Trend", "Model"),
    dtype_hints={"Year": "int", "Actual": "float", "Fitted": "float", "Model": "string"},
)

FORECAST_OUTPUT = SchemaSpec(
    name="forecast_output",
    required_cols=("Year", "Model", "Forecast"),
    dtype_hints={"Year": "int", "Model": "string", "Forecast": "float"},
)

METRICS_OUTPUT = SchemaSpec(
    name="metrics_output",
    required_cols=("Model", "SSE", "MSE", "RMSE", "MAE", "MAPE"),
)


def assert_schema(df: pd.DataFrame, schema: SchemaSpec) -> None:
    missing = _missing_cols(df, schema.required_cols)
    if missing:
        raise KeyError(f"[{schema.name}] missing columns: {missing}. Found: {list(df.columns)}")
