"""src/hdiforecast/io/__init__.py"""
from .readers import read_csv, read_excel, read_series, read_series_table, read_table
from .writers import ensure_parent_dir, write_csv, write_forecast_artifact

__all__ = [
    "read_csv",
    "read_excel",
    "read_table",
    "read_series_table",
    "read_series",
    "ensure_parent_dir",
    "write_csv",
    "write_forecast_artifact",
]
