"""src/hdiforecast/modeling/series.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

import numpy as np
import pandas as pd

from hdiforecast.common.errors import InvalidSeries, NonFiniteValue


def _readonly(a: np.ndarray) -> np.ndarray:
    a = np.array(a, copy=True)
    a.flags.writeable = False
    return a


@dataclass(frozen=True, eq=False)
class TimeSeries:
    """
    Regularly spaced series of (period, value) pairs.

    periods are integers increasing by a constant positive step (1 for
    annual data); values are finite floats. No gaps are allowed inside the
    observed range.
    """
    periods: np.ndarray
    values: np.ndarray
    name: str = "Value"

    def __post_init__(self) -> None:
        periods = np.asarray(self.periods)
        values = np.asarray(self.values, dtype=float)

        if periods.ndim != 1 or values.ndim != 1:
            raise InvalidSeries("periods and values must be 1-dimensional")
        if periods.shape != values.shape:
            raise InvalidSeries(f"periods/values length mismatch: {periods.size} vs {values.size}")

        bad = ~np.isfinite(values)
        if bad.any():
            idx = np.flatnonzero(bad).tolist()
            raise NonFiniteValue(f"series '{self.name}' has non-finite values at positions {idx}")

        if periods.size and not np.all(np.equal(np.mod(periods, 1), 0)):
            raise InvalidSeries("periods must be integers")
        periods = periods.astype(int)

        if periods.size > 1:
            diffs = np.diff(periods)
            if np.any(diffs <= 0):
                raise InvalidSeries("periods must be strictly increasing")
            if np.any(diffs != diffs[0]):
                raise InvalidSeries(f"periods must have a constant step (found steps {sorted(set(diffs.tolist()))})")

        object.__setattr__(self, "periods", _readonly(periods))
        object.__setattr__(self, "values", _readonly(values))

    def __len__(self) -> int:
        return int(self.values.size)

    @property
    def step(self) -> int:
        return int(self.periods[1] - self.periods[0]) if len(self) > 1 else 1

    def future_periods(self, horizon: int) -> np.ndarray:
        """Periods immediately following the last observation."""
        last = int(self.periods[-1])
        return last + self.step * np.arange(1, int(horizon) + 1, dtype=int)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"Year": self.periods.astype(int), self.name: self.values.astype(float)})

    @classmethod
    def from_values(cls, values: Iterable[float], *, start: int = 0, name: str = "Value") -> "TimeSeries":
        v = np.asarray(list(values), dtype=float)
        return cls(periods=np.arange(int(start), int(start) + v.size, dtype=int), values=v, name=name)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, float]], *, name: str = "Value") -> "TimeSeries":
        rows = list(pairs)
        periods = np.asarray([p for p, _ in rows])
        values = np.asarray([v for _, v in rows], dtype=float)
        return cls(periods=periods, values=values, name=name)

    @classmethod
    def from_frame(
        cls,
        df: pd.DataFrame,
        *,
        period_col: str = "Year",
        value_col: str = "Value",
        name: str | None = None,
    ) -> "TimeSeries":
        missing = [c for c in (period_col, value_col) if c not in df.columns]
        if missing:
            raise KeyError(f"series frame missing columns: {missing}. Found: {list(df.columns)}")
        d = df.sort_values(period_col)
        return cls(
            periods=d[period_col].to_numpy(),
            values=pd.to_numeric(d[value_col], errors="coerce").to_numpy(dtype=float),
            name=name or value_col,
        )


def as_series(obj: Any, *, name: str = "Value") -> TimeSeries:
    """
    Coerce supported inputs into a TimeSeries:
      - TimeSeries (returned as is)
      - pandas Series (index = periods)
      - sequence of (period, value) pairs
      - plain sequence / array of numbers (periods 0..n-1)
    """
    if isinstance(obj, TimeSeries):
        return obj
    if isinstance(obj, pd.Series):
        return TimeSeries(
            periods=obj.index.to_numpy(),
            values=obj.to_numpy(dtype=float),
            name=str(obj.name) if obj.name is not None else name,
        )

    seq: Sequence[Any] = list(obj)
    if seq and all(isinstance(x, (tuple, list)) and len(x) == 2 for x in seq):
        return TimeSeries.from_pairs(seq, name=name)
    return TimeSeries.from_values(seq, name=name)
