"""tests/unit/test_series.py"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from hdiforecast.common.errors import InvalidSeries, NonFiniteValue
from hdiforecast.modeling.series import TimeSeries, as_series


def test_as_series_accepts_pairs() -> None:
    s = as_series([(2010, 66.0), (2011, 66.5), (2012, 67.1)])
    assert s.periods.tolist() == [2010, 2011, 2012]
    assert s.values.tolist() == [66.0, 66.5, 67.1]


def test_as_series_accepts_plain_values() -> None:
    s = as_series(np.array([1.0, 2.0, 3.0]))
    assert s.periods.tolist() == [0, 1, 2]


def test_as_series_accepts_pandas_series() -> None:
    ps = pd.Series([66.0, 66.5, 67.1], index=[2020, 2021, 2022], name="IPM")
    s = as_series(ps)
    assert s.name == "IPM"
    assert s.periods.tolist() == [2020, 2021, 2022]


def test_as_series_passes_through_time_series(ipm_series) -> None:
    assert as_series(ipm_series) is ipm_series


def test_future_periods_follow_last_year(ipm_series) -> None:
    assert ipm_series.future_periods(5).tolist() == [2023, 2024, 2025, 2026, 2027]


def test_future_periods_respect_step() -> None:
    s = TimeSeries(periods=np.array([2000, 2005, 2010]), values=np.array([1.0, 2.0, 3.0]))
    assert s.step == 5
    assert s.future_periods(2).tolist() == [2015, 2020]


def test_gap_in_periods_is_invalid() -> None:
    with pytest.raises(InvalidSeries):
        TimeSeries(periods=np.array([2010, 2011, 2013]), values=np.array([1.0, 2.0, 3.0]))


def test_non_increasing_periods_are_invalid() -> None:
    with pytest.raises(InvalidSeries):
        TimeSeries(periods=np.array([2011, 2010, 2012]), values=np.array([1.0, 2.0, 3.0]))
    with pytest.raises(InvalidSeries):
        TimeSeries(periods=np.array([2010, 2010, 2011]), values=np.array([1.0, 2.0, 3.0]))


def test_length_mismatch_is_invalid() -> None:
    with pytest.raises(InvalidSeries):
        TimeSeries(periods=np.array([2010, 2011]), values=np.array([1.0, 2.0, 3.0]))


def test_non_finite_value_names_positions() -> None:
    with pytest.raises(NonFiniteValue, match=r"\[1\]"):
        TimeSeries.from_values([1.0, float("nan"), 3.0])


def test_from_frame_sorts_by_year() -> None:
    df = pd.DataFrame({"Year": [2012, 2010, 2011], "Value": [3.0, 1.0, 2.0]})
    s = TimeSeries.from_frame(df)
    assert s.values.tolist() == [1.0, 2.0, 3.0]


def test_from_frame_missing_column() -> None:
    with pytest.raises(KeyError):
        TimeSeries.from_frame(pd.DataFrame({"Year": [2010]}))
