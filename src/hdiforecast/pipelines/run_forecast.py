"""src/hdiforecast/pipelines/run_forecast.py"""

from __future__ import annotations

import logging
from pathlib import Path

from hdiforecast.common.config import AppConfig
from hdiforecast.common.errors import ForecastError
from hdiforecast.common.utils import safe_float, safe_int
from hdiforecast.forecasting.forecast import ForecastResult, compare_models
from hdiforecast.io.readers import read_series
from hdiforecast.modeling.holt import DEFAULT_MAXITER, MODEL_KINDS
from hdiforecast.modeling.selection import pick_best_model
from hdiforecast.reporting.export import export_report_pack
from hdiforecast.reporting.tables import make_metrics_table


logger = logging.getLogger(__name__)


def _output_dir(cfg: AppConfig, key: str, default: str) -> Path:
    p = cfg.paths.get(key)
    return p if p is not None else cfg.resolve(default)


def run_forecast(cfg: AppConfig) -> dict[str, ForecastResult]:
    """
    Run the full forecast pipeline:
      1) Read the configured annual series (CSV or Excel sheet)
      2) Fit every configured model (explicit params or estimated)
      3) Compute in-sample metrics and forecast `horizon` years ahead
      4) Export tables + figures and log the best model
    """
    # --- Input ---
    data_cfg = cfg.data
    if not data_cfg.get("path"):
        raise ValueError("Missing data.path in config")
    data_path = cfg.resolve(data_cfg["path"])

    try:
        series = read_series(
            data_path,
            sheet=data_cfg.get("sheet"),
            period_col=data_cfg.get("period_col"),
            value_col=data_cfg.get("value_col"),
            name=data_cfg.get("name"),
        )
    except (ForecastError, KeyError, FileNotFoundError):
        logger.exception("Failed to load series from %s", data_path)
        raise
    logger.info(
        "Loaded %s: %d observations (%d-%d) from %s",
        series.name, len(series), int(series.periods[0]), int(series.periods[-1]), data_path,
    )

    # --- Settings ---
    horizon = safe_int(cfg.forecast.get("horizon", 5), 5)
    interval_level = cfg.forecast.get("interval_level", 0.95)
    interval_level = None if interval_level is None else safe_float(interval_level, 0.95)

    models = [str(m).strip().lower() for m in cfg.modeling.get("models", list(MODEL_KINDS))]
    metric_primary = str(cfg.modeling.get("metric_primary", "rmse")).lower()
    maxiter = safe_int(cfg.modeling.get("maxiter", DEFAULT_MAXITER), DEFAULT_MAXITER)
    params = {m: cfg.model_params(m) for m in models}

    # --- Fit + forecast (a failing model is logged and skipped) ---
    results: dict[str, ForecastResult] = {}
    last_error: ForecastError | None = None
    for model_name in models:
        try:
            results.update(
                compare_models(
                    series,
                    horizon,
                    models=[model_name],
                    params=params,
                    interval_level=interval_level,
                    maxiter=maxiter,
                )
            )
        except ForecastError as e:
            logger.exception("Model %s failed on %s: %s", model_name, series.name, e)
            last_error = e

    if not results:
        if last_error is not None:
            raise last_error
        raise ValueError("No models configured under modeling.models")

    sel = pick_best_model(make_metrics_table(results).to_dict(orient="records"), primary=metric_primary)
    logger.info("Best model by %s: %s (%s=%.6f)", sel.metric, sel.best_model, sel.metric, sel.best_row[sel.metric])

    # --- Output ---
    reports_dir = _output_dir(cfg, "reports_dir", "artifacts/reports")
    pack = export_report_pack(series, results, out_dir=reports_dir)

    logger.info("Forecasting complete.")
    logger.info("Saved model comparison: %s", pack.metrics_csv)
    logger.info("Saved forecasts: %s", pack.forecast_csv)
    logger.info("Saved figures to: %s", pack.figures_dir)
    return results
