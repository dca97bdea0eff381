"""Core module - configuration, units and input validation."""

from forage.core import units, validation
from forage.core.config import ModelConstants, Settings, settings
from forage.core.units import (
    format_fraction,
    format_mass,
    format_rain,
    format_swath_density,
    format_temp,
    is_imperial,
    swath_density_to_kg_ha,
)
from forage.core.validation import (
    InvalidInputError,
    is_strict,
    require_fraction,
    require_non_negative,
    require_positive,
    require_range,
)

__all__ = [
    "units",
    "validation",
    "settings",
    "Settings",
    "ModelConstants",
    # Validation
    "InvalidInputError",
    "is_strict",
    "require_fraction",
    "require_non_negative",
    "require_positive",
    "require_range",
    # Unit conversion helpers
    "format_temp",
    "format_rain",
    "format_swath_density",
    "format_mass",
    "format_fraction",
    "swath_density_to_kg_ha",
    "is_imperial",
]
