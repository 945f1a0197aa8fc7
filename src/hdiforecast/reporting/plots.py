"""src/hdiforecast/reporting/plots.py"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

import matplotlib.pyplot as plt

from hdiforecast.forecasting.forecast import ForecastResult
from hdiforecast.modeling.series import TimeSeries


MODEL_LABELS = {"holt": "Holt", "damped_holt": "Damped Holt"}


def _ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def _label(model_name: str) -> str:
    return MODEL_LABELS.get(model_name, model_name)


def plot_forecast(
    series: TimeSeries,
    result: ForecastResult,
    *,
    out_dir: Path,
    ylabel: str | None = None,
) -> Path:
    """
    Saves one PNG per model:
        forecast_{model}.png

    Shows the actual series, in-sample fitted values, the forecast and,
    when available, the prediction interval band.
    """
    _ensure_dir(out_dir)
    model = result.model
    name = _label(result.model_name)

    plt.figure()
    plt.plot(series.periods, series.values, marker="o", label="Actual")
    plt.plot(model.fitted_periods, model.fitted, linestyle="--", label="Fitted")
    plt.plot(result.periods, result.values, marker="o", label="Forecast")
    if result.intervals is not None:
        plt.fill_between(
            result.periods,
            result.intervals.lower,
            result.intervals.upper,
            alpha=0.2,
            label=f"{int(round(result.intervals.level * 100))}% PI",
        )

    p = model.params
    title = f"{series.name} | {name} (alpha={p.alpha:.3f}, beta={p.beta:.3f}"
    title += f", phi={p.phi:.3f})" if model.damped else ")"
    plt.title(title)
    plt.xlabel("Year")
    plt.ylabel(ylabel or series.name)
    plt.legend()
    out = out_dir / f"forecast_{result.model_name}.png"
    plt.savefig(out, dpi=150, bbox_inches="tight")
    plt.close()
    return out


def plot_model_comparison(
    series: TimeSeries,
    results: Mapping[str, ForecastResult],
    *,
    out_dir: Path,
    ylabel: str | None = None,
) -> Path | None:
    """Saves forecast_comparison.png with every model's forecast over the actual series."""
    if not results:
        return None
    _ensure_dir(out_dir)

    plt.figure()
    plt.plot(series.periods, series.values, marker="o", color="black", label="Actual")
    for name, res in results.items():
        rmse = res.metrics.rmse
        plt.plot(res.periods, res.values, marker="o", label=f"{_label(name)} (RMSE={rmse:.4f})")

    plt.title(f"{series.name} | forecast comparison")
    plt.xlabel("Year")
    plt.ylabel(ylabel or series.name)
    plt.legend()
    out = out_dir / "forecast_comparison.png"
    plt.savefig(out, dpi=150, bbox_inches="tight")
    plt.close()
    return out
