"""tests/unit/test_evaluation.py"""

from __future__ import annotations

import math

import numpy as np
import pytest

from hdiforecast.common.errors import DivisionByZero, InsufficientData
from hdiforecast.modeling.evaluation import accuracy, compute_metrics, mae, mape
from hdiforecast.modeling.holt import fit_damped_holt, fit_holt


def test_mape_basic() -> None:
    y_true = np.array([100.0, 200.0])
    y_pred = np.array([110.0, 190.0])
    # |10|/100 = 0.10, |10|/200 = 0.05 -> mean 0.075 -> 7.5%
    assert mape(y_true, y_pred) == pytest.approx(7.5, abs=1e-12)


def test_mae_basic() -> None:
    y_true = np.array([1.0, 2.0, 3.0])
    y_pred = np.array([2.0, 2.0, 1.0])  # abs err: [1,0,2]
    assert mae(y_true, y_pred) == pytest.approx(1.0, abs=1e-12)


def test_compute_metrics_basic() -> None:
    pack = compute_metrics([1.0, 2.0, 3.0], [1.0, 2.0, 4.0])  # error: [0,0,-1]
    assert pack.sse == pytest.approx(1.0)
    assert pack.mse == pytest.approx(1.0 / 3.0)
    assert pack.rmse == pytest.approx(math.sqrt(1.0 / 3.0))
    assert pack.n == 3


def test_compute_metrics_rejects_empty() -> None:
    with pytest.raises(InsufficientData):
        compute_metrics([], [])


def test_compute_metrics_shape_mismatch() -> None:
    with pytest.raises(ValueError):
        compute_metrics([1.0, 2.0], [1.0])


@pytest.mark.parametrize(
    "fit",
    [
        lambda s: fit_holt(s, alpha=0.8, beta=0.2),
        lambda s: fit_holt(s),
        lambda s: fit_damped_holt(s, alpha=0.5, beta=0.1, phi=0.9),
        lambda s: fit_damped_holt(s),
    ],
)
def test_metric_identities_hold_for_fitted_models(ipm_series, fit) -> None:
    model = fit(ipm_series)
    m = accuracy(model)

    n_fitted = len(ipm_series) - 1
    assert m.n == n_fitted == model.n_fitted
    assert m.sse == pytest.approx(float(np.sum((model.actuals - model.fitted) ** 2)), rel=1e-12)
    assert m.mse == m.sse / n_fitted
    assert m.rmse == math.sqrt(m.mse)


def test_worked_example_sse(short_series) -> None:
    m = accuracy(fit_holt(short_series, alpha=0.8, beta=0.2))
    # residuals: 0, 0.1, 0.004, -0.11584
    expected = 0.0 ** 2 + 0.1 ** 2 + 0.004 ** 2 + 0.11584 ** 2
    assert m.sse == pytest.approx(expected, abs=1e-12)
    assert m.mse == pytest.approx(expected / 4, abs=1e-12)


def test_mape_zero_actual_in_sample_raises() -> None:
    model = fit_holt([1.0, 2.0, 0.0, 1.0], alpha=0.5, beta=0.5)
    with pytest.raises(DivisionByZero):
        accuracy(model)
    with pytest.raises(ZeroDivisionError):
        accuracy(model)


def test_zero_first_observation_is_outside_mape_range() -> None:
    # y_1 seeds the state and is never an in-sample actual
    model = fit_holt([0.0, 1.0, 2.0, 3.5], alpha=0.5, beta=0.5)
    assert math.isfinite(accuracy(model).mape)


def test_mape_is_nonnegative_and_bounded(ipm_series) -> None:
    model = fit_damped_holt(ipm_series, alpha=0.3, beta=0.6, phi=0.8)
    m = accuracy(model)
    upper = 100.0 * np.max(np.abs(model.residuals)) / np.min(np.abs(model.actuals))
    assert 0.0 <= m.mape <= upper


def test_metric_pack_as_dict_stable_keys(short_series) -> None:
    d = accuracy(fit_holt(short_series, alpha=0.8, beta=0.2)).as_dict()
    assert list(d.keys()) == ["SSE", "MSE", "RMSE", "MAE", "MAPE"]
    assert all(isinstance(v, float) for v in d.values())
