"""src/hdiforecast/reporting/export.py"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from hdiforecast.forecasting.forecast import ForecastResult
from hdiforecast.io.writers import write_forecast_artifact
from hdiforecast.modeling.series import TimeSeries
from hdiforecast.reporting.plots import plot_forecast, plot_model_comparison
from hdiforecast.reporting.tables import (
    make_fitted_table,
    make_forecast_table,
    make_forecast_wide_table,
    make_metrics_table,
)
from hdiforecast.validation.checks import validate_df
from hdiforecast.validation.schemas import FITTED_OUTPUT, FORECAST_OUTPUT, METRICS_OUTPUT


@dataclass(frozen=True)
class ReportPackPaths:
    out_dir: Path
    tables_dir: Path
    figures_dir: Path

    metrics_csv: Path
    forecast_csv: Path
    forecast_wide_csv: Path
    fitted_csv: Path
    figures: tuple[Path, ...]


def _ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def export_report_pack(
    series: TimeSeries,
    results: Mapping[str, ForecastResult],
    *,
    out_dir: Path,
) -> ReportPackPaths:
    """
    Build a reporting "pack":
        - metrics / forecast / fitted CSV tables
        - one PNG per model plus a comparison chart

    This module does NOT fit anything. It consumes finished ForecastResults.
    """
    out_dir = Path(out_dir)
    tables_dir = out_dir / "tables"
    figures_dir = out_dir / "figures"
    _ensure_dir(tables_dir)
    _ensure_dir(figures_dir)

    metrics = make_metrics_table(results)
    forecasts = make_forecast_table(results)
    fitted = make_fitted_table(results)

    # Validate outputs (fail early)
    validate_df(
        metrics,
        schema=METRICS_OUTPUT,
        nonnegative_cols=("SSE", "MSE", "RMSE", "MAE"),
        unique_keys=("Model",),
    ).raise_if_failed()
    validate_df(forecasts, schema=FORECAST_OUTPUT, unique_keys=("Model", "Year")).raise_if_failed()
    validate_df(fitted, schema=FITTED_OUTPUT, unique_keys=("Model", "Year")).raise_if_failed()

    metrics_csv = write_forecast_artifact(metrics, tables_dir / "model_comparison.csv")
    forecast_csv = write_forecast_artifact(forecasts, tables_dir / "forecasts.csv")
    forecast_wide_csv = write_forecast_artifact(make_forecast_wide_table(results), tables_dir / "forecasts_wide.csv")
    fitted_csv = write_forecast_artifact(fitted, tables_dir / "fitted.csv")

    figures: list[Path] = [plot_forecast(series, res, out_dir=figures_dir) for res in results.values()]
    comparison = plot_model_comparison(series, results, out_dir=figures_dir)
    if comparison is not None:
        figures.append(comparison)

    return ReportPackPaths(
        out_dir=out_dir,
        tables_dir=tables_dir,
        figures_dir=figures_dir,
        metrics_csv=metrics_csv,
        forecast_csv=forecast_csv,
        forecast_wide_csv=forecast_wide_csv,
        fitted_csv=fitted_csv,
        figures=tuple(figures),
    )
