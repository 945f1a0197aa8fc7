"""src/hdiforecast/reporting/__init__.py"""

from __future__ import annotations

from .export import ReportPackPaths, export_report_pack
from .plots import plot_forecast, plot_model_comparison
from .tables import (
    make_fitted_table,
    make_forecast_table,
    make_forecast_wide_table,
    make_metrics_table,
)

__all__ = [
    "ReportPackPaths",
    "export_report_pack",
    "plot_forecast",
    "plot_model_comparison",
    "make_metrics_table",
    "make_forecast_table",
    "make_forecast_wide_table",
    "make_fitted_table",
]
