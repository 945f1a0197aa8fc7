"""src/hdiforecast/validation/checks.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from hdiforecast.validation.schemas import SERIES_CANONICAL, SchemaSpec, assert_schema


@dataclass(frozen=True)
class CheckResult:
    ok: bool
    errors: tuple[str, ...]

    def raise_if_failed(self) -> None:
        if not self.ok:
            msg = "\n".join(self.errors) if self.errors else "Validation failed."
            raise ValueError(msg)


def _as_int_series(s: pd.Series) -> pd.Series:
    return pd.to_numeric(s, errors="coerce").astype("Int64")


def _as_float_series(s: pd.Series) -> pd.Series:
    return pd.to_numeric(s, errors="coerce")


def check_consecutive_years(df: pd.DataFrame, *, col: str = "Year", step: int = 1) -> list[str]:
    """Years must cover a contiguous range with a fixed step (no gaps)."""
    errs: list[str] = []
    if col not in df.columns:
        return errs
    y = _as_int_series(df[col]).dropna().sort_values().to_numpy(dtype=int)
    if y.size < 2:
        return errs
    diffs = np.diff(y)
    bad = np.flatnonzero(diffs != int(step))
    if bad.size:
        sample = [(int(y[i]), int(y[i + 1])) for i in bad[:10]]
        errs.append(f"{col}: expected step {step}; irregular transitions={sample}")
    return errs


def check_finite(df: pd.DataFrame, cols: Sequence[str]) -> list[str]:
    errs: list[str] = []
    for c in cols:
        if c not in df.columns:
            continue
        x = _as_float_series(df[c]).astype(float).to_numpy()
        bad = ~np.isfinite(x)
        n_bad = int(bad.sum())
        if n_bad:
            errs.append(f"{c}: {n_bad} missing or non-finite values")
    return errs


def check_nonnegative(df: pd.DataFrame, cols: Sequence[str]) -> list[str]:
    errs: list[str] = []
    for c in cols:
        if c not in df.columns:
            continue
        x = _as_float_series(df[c])
        n_bad = int((x < 0).sum())
        if n_bad:
            errs.append(f"{c}: {n_bad} negative values found")
    return errs


def check_unique_keys(df: pd.DataFrame, keys: Sequence[str]) -> list[str]:
    errs: list[str] = []
    missing = [k for k in keys if k not in df.columns]
    if missing:
        return errs

    dup_mask = df.duplicated(subset=list(keys), keep=False)
    n_dup = int(dup_mask.sum())
    if n_dup:
        sample = df.loc[dup_mask, list(keys)].head(10).to_dict(orient="records")
        errs.append(f"duplicate keys on {list(keys)}; dup_rows={n_dup}; sample={sample}")
    return errs


def validate_df(
    df: pd.DataFrame,
    *,
    schema: SchemaSpec | None = None,
    year_col: str | None = None,
    year_step: int | None = None,
    finite_cols: Sequence[str] = (),
    nonnegative_cols: Sequence[str] = (),
    unique_keys: Sequence[str] = (),
) -> CheckResult:
    """
    Generic validation runner.
    - validates required columns via schema (if provided)
    - validates year spacing (if year_col and year_step)
    - validates finiteness, nonnegativity and uniqueness (optional)
    """
    errors: list[str] = []

    if schema is not None:
        try:
            assert_schema(df, schema)
        except KeyError as e:
            errors.append(str(e))
            # If schema fails, don't attempt downstream checks that may crash
            return CheckResult(ok=False, errors=tuple(errors))

    if year_col and year_step is not None:
        errors.extend(check_consecutive_years(df, col=year_col, step=year_step))

    if finite_cols:
        errors.extend(check_finite(df, cols=list(finite_cols)))

    if nonnegative_cols:
        errors.extend(check_nonnegative(df, cols=list(nonnegative_cols)))

    if unique_keys:
        errors.extend(check_unique_keys(df, keys=list(unique_keys)))

    return CheckResult(ok=not errors, errors=tuple(errors))


def validate_series_canonical(df: pd.DataFrame) -> CheckResult:
    """Canonical Year/Value series: unique consecutive years, finite values."""
    return validate_df(
        df,
        schema=SERIES_CANONICAL,
        year_col="Year",
        year_step=1,
        finite_cols=("Year", "Value"),
        unique_keys=("Year",),
    )
