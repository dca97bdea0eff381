"""Hay and silage storage losses."""

from forage.storage.cli import cli
from forage.storage.losses import (
    EFFLUENT_LAST_DAY,
    effluent_fraction,
    loss_effluent,
    loss_fermentation,
    loss_hay_storage,
    max_effluent_volume,
)

__all__ = [
    "loss_hay_storage",
    "loss_fermentation",
    "loss_effluent",
    "max_effluent_volume",
    "effluent_fraction",
    "EFFLUENT_LAST_DAY",
    "cli",
]
