"""src/hdiforecast/cli.py"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.table import Table

from hdiforecast.common.config import load_config
from hdiforecast.common.errors import ForecastError
from hdiforecast.common.logging import setup_logging
from hdiforecast.forecasting.forecast import build_forecast
from hdiforecast.io.readers import read_series
from hdiforecast.modeling.holt import MODEL_DAMPED_HOLT, fit_model
from hdiforecast.pipelines.run_forecast import run_forecast

app = typer.Typer(help="Holt / damped Holt forecasting CLI for annual HDI series")

DEFAULT_CONFIG = "configs/config.yaml"


@app.command()
def init(config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config")) -> None:
    """Create expected directories from config (data/, artifacts/, etc.)."""
    cfg = load_config(config_path)
    setup_logging(cfg)

    created = cfg.ensure_directories()
    print("[bold green]Init complete.[/bold green]")
    if created:
        print("Created directories:")
        for p in created:
            print(f"  - {p}")
    else:
        print("No directories needed (already exist).")


@app.command()
def forecast(config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config")) -> None:
    """Fit configured models, forecast, and export tables + figures."""
    cfg = load_config(config_path)
    setup_logging(cfg)
    cfg.ensure_directories()
    run_forecast(cfg)
    print("[bold green]Forecasting complete.[/bold green]")


@app.command()
def fit(
    path: Path = typer.Argument(..., help="CSV or Excel file with Year and value columns"),
    model: str = typer.Option(MODEL_DAMPED_HOLT, help="holt | damped_holt"),
    horizon: int = typer.Option(5, help="Number of years to forecast"),
    alpha: Optional[float] = typer.Option(None, help="Level smoothing (estimated if omitted)"),
    beta: Optional[float] = typer.Option(None, help="Trend smoothing (estimated if omitted)"),
    phi: Optional[float] = typer.Option(None, help="Damping factor, damped_holt only"),
    sheet: Optional[str] = typer.Option(None, help="Excel sheet name"),
    value_col: Optional[str] = typer.Option(None, help="Value column (auto-detected if omitted)"),
    level: float = typer.Option(0.95, help="Prediction interval level"),
) -> None:
    """Fit one model on a file and print metrics and forecasts (no config needed)."""
    try:
        series = read_series(path, sheet=sheet, value_col=value_col)
        fitted = fit_model(model, series, alpha=alpha, beta=beta, phi=phi)
        result = build_forecast(fitted, horizon, interval_level=level)
    except ForecastError as e:
        print(f"[bold red]{type(e).__name__}:[/bold red] {e}")
        raise typer.Exit(code=1)

    params = ", ".join(f"{k}={v:.4f}" for k, v in fitted.params.as_dict().items())
    print(f"[bold]{fitted.kind}[/bold] ({params})")

    metrics = Table(title="In-sample accuracy")
    for key in result.metrics.as_dict():
        metrics.add_column(key, justify="right")
    metrics.add_row(*(f"{v:.6f}" for v in result.metrics.as_dict().values()))
    print(metrics)

    table = Table(title=f"Forecast ({horizon} steps)")
    table.add_column("Year", justify="right")
    table.add_column("Forecast", justify="right")
    table.add_column("Lower", justify="right")
    table.add_column("Upper", justify="right")
    iv = result.intervals
    for i, (year, value) in enumerate(zip(result.periods, result.values)):
        table.add_row(str(int(year)), f"{value:.4f}", f"{iv.lower[i]:.4f}", f"{iv.upper[i]:.4f}")
    print(table)


if __name__ == "__main__":
    app()
