"""src/hdiforecast/pipelines/__init__.py"""

from .run_forecast import run_forecast

__all__ = [
    "run_forecast",
]
