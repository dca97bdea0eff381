"""Field curing and harvest losses.

This module provides:
- Hourly field curing simulation (curing.py)
- Respiration, rain and shatter loss equations (losses.py)
- CLI for curing and harvest loss estimates (cli.py)
"""

from forage.harvest.cli import cli
from forage.harvest.curing import (
    CuringSummary,
    adjusted_drying_rate,
    curing,
    diurnal_factor,
    drying_rate,
    equilibrium_moisture,
    hourly_moisture,
    rain_adjusted_moisture,
    rewetted_moisture,
    summarize_curing,
    to_dry_basis,
    to_fresh_basis,
)
from forage.harvest.losses import (
    HarvestLosses,
    estimate_harvest_losses,
    loss_mowing,
    loss_rain,
    loss_raking,
    loss_respiration,
    loss_tedding,
)

__all__ = [
    # curing
    "curing",
    "summarize_curing",
    "CuringSummary",
    "to_dry_basis",
    "to_fresh_basis",
    "equilibrium_moisture",
    "drying_rate",
    "adjusted_drying_rate",
    "diurnal_factor",
    "hourly_moisture",
    "rain_adjusted_moisture",
    "rewetted_moisture",
    # losses
    "loss_respiration",
    "loss_rain",
    "loss_mowing",
    "loss_tedding",
    "loss_raking",
    "estimate_harvest_losses",
    "HarvestLosses",
    # cli
    "cli",
]
