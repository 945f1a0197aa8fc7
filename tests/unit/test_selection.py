"""tests/unit/test_selection.py"""

from __future__ import annotations

import pytest

from hdiforecast.modeling.selection import pick_best_model


ROWS = [
    {"Model": "holt", "RMSE": 0.30, "MAPE": 0.40},
    {"Model": "damped_holt", "RMSE": 0.25, "MAPE": 0.45},
]


def test_pick_best_by_rmse() -> None:
    sel = pick_best_model(ROWS, primary="rmse")
    assert sel.best_model == "damped_holt"
    assert sel.metric == "RMSE"


def test_pick_best_by_mape_case_insensitive() -> None:
    assert pick_best_model(ROWS, primary="MAPE").best_model == "holt"


def test_nan_rows_are_skipped() -> None:
    rows = [{"Model": "holt", "RMSE": float("nan")}, {"Model": "damped_holt", "RMSE": 1.0}]
    assert pick_best_model(rows).best_model == "damped_holt"


def test_all_nan_raises() -> None:
    with pytest.raises(ValueError):
        pick_best_model([{"Model": "holt", "RMSE": float("nan")}])


def test_empty_and_unknown_metric_raise() -> None:
    with pytest.raises(ValueError):
        pick_best_model([])
    with pytest.raises(ValueError):
        pick_best_model(ROWS, primary="aic")


def test_to_dict_contains_best_row() -> None:
    d = pick_best_model(ROWS).to_dict()
    assert d["Best_Model"] == "damped_holt"
    assert d["RMSE"] == 0.25
