"""Forage field curing, harvest and storage loss models.

Empirical equations for the moisture of cut forage while it cures in the
field and for the dry matter lost during harvest and storage.

Subpackages:
- forage.core: Configuration, unit display and input validation
- forage.harvest: Field curing simulation and harvest losses
- forage.storage: Hay and silage storage losses
"""

# Re-export common items for convenience
from forage.core import InvalidInputError, ModelConstants, settings
from forage.harvest import (
    curing,
    estimate_harvest_losses,
    loss_mowing,
    loss_rain,
    loss_raking,
    loss_respiration,
    loss_tedding,
    summarize_curing,
)
from forage.storage import loss_effluent, loss_fermentation, loss_hay_storage

__all__ = [
    "settings",
    "ModelConstants",
    "InvalidInputError",
    "curing",
    "summarize_curing",
    "loss_respiration",
    "loss_rain",
    "loss_mowing",
    "loss_tedding",
    "loss_raking",
    "estimate_harvest_losses",
    "loss_hay_storage",
    "loss_fermentation",
    "loss_effluent",
]

__version__ = "0.1.0"
