"""src/hdiforecast/io/readers.py"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

from hdiforecast.common.errors import InvalidSeries, NonFiniteValue
from hdiforecast.modeling.series import TimeSeries
from hdiforecast.validation.checks import validate_series_canonical


YEAR_CANDIDATES = ["Year", "year", "YEAR", "Tahun", "tahun", "TAHUN", "Period", "period"]
VALUE_CANDIDATES = ["Value", "value", "IPM", "ipm", "HDI", "hdi", "Nilai", "nilai"]

EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}


# ---------- generic helpers ----------

def read_csv(path: Path, *, dtype: dict[str, Any] | None = None) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Missing file:\n{path}")
    return pd.read_csv(path, dtype=dtype)


def read_excel(path: Path, *, sheet: str | int | None = None) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Missing file:\n{path}")
    return pd.read_excel(path, sheet_name=0 if sheet is None else sheet, engine="openpyxl")


def read_table(path: Path, *, sheet: str | int | None = None) -> pd.DataFrame:
    """CSV or Excel, chosen by file suffix."""
    path = Path(path)
    if path.suffix.lower() in EXCEL_SUFFIXES:
        return read_excel(path, sheet=sheet)
    return read_csv(path)


def _rename_first(df: pd.DataFrame, candidates: list[str], target: str) -> pd.DataFrame:
    if target in df.columns:
        return df
    for candidate in candidates:
        if candidate in df.columns:
            return df.rename(columns={candidate: target})
    return df


# ---------- domain-specific reads ----------

def read_series_table(
    path: Path,
    *,
    sheet: str | int | None = None,
    period_col: str | None = None,
    value_col: str | None = None,
) -> pd.DataFrame:
    """
    Standardize an annual indicator table into:
        Year, Value

    Supports common column variants:
      - Year / Tahun / Period
      - Value / IPM / HDI / Nilai
    Explicit period_col / value_col take precedence.
    """
    df = read_table(Path(path), sheet=sheet)
    df = df.copy()
    df.columns = [str(c).strip() for c in df.columns]

    if period_col:
        df = df.rename(columns={period_col: "Year"})
    if value_col:
        df = df.rename(columns={value_col: "Value"})
    df = _rename_first(df, YEAR_CANDIDATES, "Year")
    df = _rename_first(df, VALUE_CANDIDATES, "Value")

    if "Year" not in df.columns:
        raise KeyError(f"Series missing 'Year'. Found columns: {list(df.columns)}")
    if "Value" not in df.columns:
        raise KeyError(f"Series missing 'Value'. Found columns: {list(df.columns)}")

    # Drop fully blank trailing rows that spreadsheets often carry
    df = df.dropna(subset=["Year", "Value"], how="all").copy()
    years = pd.to_numeric(df["Year"], errors="coerce")
    fractional = years.notna() & (years != years.round())
    if fractional.any():
        raise InvalidSeries(f"{path}: periods must be integers; got {years[fractional].tolist()}")
    df["Year"] = years.astype("Int64")
    df["Value"] = pd.to_numeric(df["Value"], errors="coerce")

    return df[["Year", "Value"]].sort_values("Year").reset_index(drop=True)


def read_series(
    path: Path,
    *,
    sheet: str | int | None = None,
    period_col: str | None = None,
    value_col: str | None = None,
    name: str | None = None,
) -> TimeSeries:
    """Read, validate and convert an annual indicator table into a TimeSeries."""
    df = read_series_table(path, sheet=sheet, period_col=period_col, value_col=value_col)

    n_missing = int(df["Value"].isna().sum())
    if n_missing:
        years = df.loc[df["Value"].isna(), "Year"].tolist()
        raise NonFiniteValue(f"{path}: missing or non-numeric values for years {years}")

    try:
        validate_series_canonical(df).raise_if_failed()
    except ValueError as e:
        raise InvalidSeries(f"{path}: {e}") from e

    return TimeSeries(
        periods=df["Year"].to_numpy(dtype=int),
        values=df["Value"].to_numpy(dtype=float),
        name=name or value_col or "Value",
    )
