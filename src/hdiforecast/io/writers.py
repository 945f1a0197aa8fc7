"""src/hdiforecast/io/writers.py"""

from __future__ import annotations

from pathlib import Path

import pandas as pd


def ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def write_csv(df: pd.DataFrame, path: Path, *, index: bool = False) -> Path:
    """Write DataFrame to CSV (ensures parent folder exists)."""
    ensure_parent_dir(path)
    df.to_csv(path, index=index)
    return path


def write_forecast_artifact(df: pd.DataFrame, path: Path, *, decimals: int = 6) -> Path:
    """
    Write a forecast artifact with light normalization:
    - integer Year
    - stripped model names
    - float columns rounded to `decimals`
    """
    out = df.copy()
    if "Year" in out.columns:
        out["Year"] = pd.to_numeric(out["Year"], errors="coerce").astype("Int64")
    if "Model" in out.columns:
        out["Model"] = out["Model"].astype(str).str.strip()
    float_cols = out.select_dtypes(include="float").columns
    out[float_cols] = out[float_cols].round(decimals)

    return write_csv(out, path, index=False)
