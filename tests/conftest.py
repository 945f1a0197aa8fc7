"""tests/conftest.py"""

from __future__ import annotations

from pathlib import Path

import matplotlib
import numpy as np
import pandas as pd
import pytest
import yaml

matplotlib.use("Agg")

from hdiforecast.common.config import AppConfig, load_config  # noqa: E402
from hdiforecast.modeling.series import TimeSeries  # noqa: E402


# Illustrative annual IPM-like series, 2010-2022 (13 points)
IPM_YEARS = list(range(2010, 2023))
IPM_VALUES = [
    66.05, 66.62, 67.19, 67.77, 68.11, 68.56, 69.04,
    69.45, 69.93, 70.38, 70.32, 70.54, 71.05,
]


@pytest.fixture
def ipm_values() -> np.ndarray:
    return np.asarray(IPM_VALUES, dtype=float)


@pytest.fixture
def ipm_series() -> TimeSeries:
    return TimeSeries(periods=np.asarray(IPM_YEARS), values=np.asarray(IPM_VALUES), name="IPM")


@pytest.fixture
def short_series() -> TimeSeries:
    return TimeSeries.from_values([70.0, 70.5, 71.1, 71.6, 72.0], start=2018, name="IPM")


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    # Emulate repository root in temp dir
    (tmp_path / "configs").mkdir(parents=True, exist_ok=True)
    (tmp_path / "data" / "raw").mkdir(parents=True, exist_ok=True)
    return tmp_path


def write_ipm_csv(path: Path) -> Path:
    """Raw table the way regional statistics offices publish it (Tahun / IPM)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame({"Tahun": IPM_YEARS, "IPM": IPM_VALUES}).to_csv(path, index=False)
    return path


def write_config(project_root: Path, **overrides) -> AppConfig:
    raw = {
        "paths": {
            "raw_dir": "data/raw",
            "reports_dir": "artifacts/reports",
        },
        "logging": {"level": "INFO"},
        "data": {"path": "data/raw/ipm.csv", "name": "IPM"},
        "forecast": {"horizon": 5, "interval_level": 0.95},
        "modeling": {
            "models": ["holt", "damped_holt"],
            "metric_primary": "rmse",
            "maxiter": 1000,
            "params": {"holt": {"alpha": 0.8, "beta": 0.2}, "damped_holt": {}},
        },
    }
    for section, values in overrides.items():
        raw.setdefault(section, {}).update(values)

    config_path = project_root / "configs" / "config.yaml"
    config_path.write_text(yaml.safe_dump(raw), encoding="utf-8")
    return load_config(config_path)


@pytest.fixture
def ipm_csv(project_root: Path) -> Path:
    return write_ipm_csv(project_root / "data" / "raw" / "ipm.csv")


@pytest.fixture
def make_cfg(project_root: Path, ipm_csv: Path):
    """Factory: write config.yaml with section overrides and load it."""
    def _make(**overrides) -> AppConfig:
        return write_config(project_root, **overrides)
    return _make


@pytest.fixture
def cfg(make_cfg) -> AppConfig:
    return make_cfg()
