"""tests/unit/test_validation.py"""

from __future__ import annotations

import pandas as pd
import pytest

from hdiforecast.validation.checks import validate_df, validate_series_canonical
from hdiforecast.validation.schemas import FORECAST_OUTPUT, SERIES_CANONICAL


def test_validate_series_passes_canonical() -> None:
    df = pd.DataFrame({"Year": [2020, 2021, 2022], "Value": [70.1, 70.4, 70.9]})
    validate_series_canonical(df).raise_if_failed()  # should not raise


def test_validate_series_fails_on_missing_columns() -> None:
    res = validate_df(pd.DataFrame({"Year": [2023]}), schema=SERIES_CANONICAL)
    assert not res.ok
    with pytest.raises(ValueError):
        res.raise_if_failed()


def test_validate_series_fails_on_gap() -> None:
    df = pd.DataFrame({"Year": [2020, 2021, 2023], "Value": [70.1, 70.4, 70.9]})
    res = validate_series_canonical(df)
    assert not res.ok
    assert any("irregular" in e for e in res.errors)


def test_validate_series_fails_on_duplicates() -> None:
    df = pd.DataFrame({"Year": [2020, 2020, 2021], "Value": [70.1, 70.1, 70.4]})
    with pytest.raises(ValueError):
        validate_series_canonical(df).raise_if_failed()


def test_validate_series_fails_on_missing_values() -> None:
    df = pd.DataFrame({"Year": [2020, 2021, 2022], "Value": [70.1, None, 70.9]})
    res = validate_series_canonical(df)
    assert any("non-finite" in e for e in res.errors)


def test_validate_df_negative_and_duplicate_keys() -> None:
    df = pd.DataFrame({"Year": [2023, 2023], "Model": ["holt", "holt"], "Forecast": [-1.0, 70.0]})
    res = validate_df(
        df,
        schema=FORECAST_OUTPUT,
        nonnegative_cols=("Forecast",),
        unique_keys=("Model", "Year"),
    )
    assert len(res.errors) == 2
    assert any("negative" in e for e in res.errors)
    assert any("duplicate keys" in e for e in res.errors)
