"""Shared test fixtures."""

import sys
from pathlib import Path

import pytest

# Add src/ to path so tests can import forage
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from forage.core.config import settings  # noqa: E402


@pytest.fixture
def imperial_units(monkeypatch):
    """Display CLI and formatted values in imperial units."""
    monkeypatch.setattr(settings, "display_units", "imperial")


@pytest.fixture
def metric_units(monkeypatch):
    """Display CLI and formatted values in metric units."""
    monkeypatch.setattr(settings, "display_units", "metric")


@pytest.fixture
def strict_settings(monkeypatch):
    """Enable strict validation through settings."""
    monkeypatch.setattr(settings, "strict_validation", True)


@pytest.fixture
def mowing_day():
    """Conditioned first cut on the day of mowing."""
    return {
        "M_i": 0.80,
        "si": 400,
        "day_len": 10,
        "rn": 0,
        "conditioned": True,
        "cut_no": 1,
        "wind": 3,
        "rh": 0.6,
        "mowed": True,
        "raked": False,
        "dry_bulb": 20.0,
        "soil_moisture": 0.2,
        "swath_density": 500.0,
    }


@pytest.fixture
def second_day():
    """Continuation day for a partly dried swath."""
    return {
        "M_i": 0.50,
        "si": 500,
        "day_len": 14,
        "rn": 0,
        "conditioned": True,
        "cut_no": 1,
        "wind": 2,
        "rh": 0.8,
        "mowed": False,
        "raked": False,
        "dry_bulb": 20.0,
        "soil_moisture": 0.2,
        "swath_density": 500.0,
    }
