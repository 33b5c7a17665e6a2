"""Shared test fixtures."""

import json
from datetime import datetime
from pathlib import Path

import pytest
import yaml

from weatherbar.config.schema import WeatherbarConfig
from weatherbar.models.wttr import WttrReport

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def wttr_body() -> bytes:
    """Raw j1 response: one current condition, today and tomorrow."""
    return (FIXTURE_DIR / "wttr_j1.json").read_bytes()


@pytest.fixture
def wttr_data(wttr_body: bytes) -> dict:
    return json.loads(wttr_body)


@pytest.fixture
def wttr_report(wttr_body: bytes) -> WttrReport:
    return WttrReport.model_validate_json(wttr_body)


@pytest.fixture
def default_config() -> WeatherbarConfig:
    return WeatherbarConfig()


@pytest.fixture
def morning_clock():
    """Clock fixed at 10:30 local time."""
    return lambda: datetime(2026, 10, 19, 10, 30)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "source": {"url": "https://test-wttr.example.com/?format=j1"},
        "display": {"lookback_hours": 3},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
