"""
Dry matter losses during hay and silage storage.

References:
-----------
[1] Klinner, W.E. (1976). "Mechanical and chemical field treatment of grass
    for conservation" Joint Conference of the IAgrE and the BGS, Paper 2

[2] McGechan, M.B. (1990). "A review of losses arising during conservation
    of grass forage: part 2, storage losses" J. Agric. Eng. Res. 45:1-30

[3] Buckmaster, D.R., Rotz, C.A. and Muck, R.E. (1989). "A comprehensive
    model of forage changes in the silo" Transactions of the ASAE 32(4):1143-1152

[4] Rotz, C.A., Pitt, R.E., Muck, R.E., Allen, M.S. and Buckmaster, D.R.
    (1993). "Direct-cut harvest and storage of alfalfa on the dairy farm"
    Transactions of the ASAE 36(3):621-628
"""

import logging
import math

from forage.core.validation import (
    is_strict,
    require_fraction,
    require_non_negative,
    require_positive,
)

logger = logging.getLogger(__name__)

# Silage with at least this dry matter fraction produces no effluent [4]
EFFLUENT_DMC_THRESHOLD = 0.29

# Effluent production periods (days since sealing)
EFFLUENT_EARLY_DAYS = 3
EFFLUENT_LAST_DAY = 79

# Dry matter lost per liter of effluent per tonne of dry matter
EFFLUENT_DM_PER_LITER = 0.1035

# Reference dry matter fraction of the fermentation loss equation [3]
FERMENTATION_REFERENCE_DMC = 0.15


def loss_hay_storage(moisture_dm: float, strict: bool | None = None) -> float:
    """
    Hay storage loss [1], coefficients fitted to McGechan (1990) fig. 1 [2].

    Args:
        moisture_dm: Hay moisture at baling [kg H2O / kg DM]
        strict: Validate inputs (settings.strict_validation if None)

    Returns:
        Storage loss [kg/kg DM], increasing exponentially with moisture
    """
    if is_strict(strict):
        require_non_negative("moisture_dm", moisture_dm)

    return 1.2662 * math.exp(0.0373 * moisture_dm * 100) / 100


def loss_fermentation(dry_matter_fraction: float, strict: bool | None = None) -> float:
    """
    Silage fermentation loss, eq. 19 [3].

    Not clamped: very dry silage gives a negative value.

    Args:
        dry_matter_fraction: Dry matter fraction of the ensiled forage [kg DM / kg FM]
        strict: Validate inputs (settings.strict_validation if None)

    Returns:
        Fermentation loss [kg/kg DM]
    """
    if is_strict(strict):
        require_fraction("dry_matter_fraction", dry_matter_fraction)

    return 0.00864 - 0.0193 * (dry_matter_fraction - FERMENTATION_REFERENCE_DMC)


def max_effluent_volume(dry_matter_fraction: float) -> float:
    """Maximum effluent production [l / t fresh matter] for a dry matter fraction [4]."""
    if dry_matter_fraction >= EFFLUENT_DMC_THRESHOLD:
        return 0.0
    return 767 - 5340 * dry_matter_fraction + 9360 * dry_matter_fraction**2


def effluent_fraction(day: float) -> float:
    """Cumulative fraction of the maximum effluent released by a day since sealing [4]."""
    if day <= EFFLUENT_EARLY_DAYS:
        return 0.0148 * day**2
    return (
        0.133
        + 0.017 * (day - 3)
        - 0.000107 * (day**2 - 9)
        + 0.241 * (1 - math.exp(-0.298 * (day - 3)))
    )


def loss_effluent(
    dry_matter_fraction: float,
    dm_mass: float,
    elapsed_days: float,
    strict: bool | None = None,
) -> float:
    """
    Daily dry matter loss through silage effluent, eq. 8 [4].

    Daily averages over two periods: days 0-3 (effluent released by day 3,
    over 3 days) and days 4-79 (effluent released between day 3 and day 79,
    over 76 days). No loss is defined after day 79 and 0.0 is returned.

    Args:
        dry_matter_fraction: Dry matter fraction of the ensiled forage [kg DM / kg FM]
        dm_mass: Dry matter in the silo (t)
        elapsed_days: Days since sealing the silo
        strict: Validate inputs (settings.strict_validation if None)

    Returns:
        Effluent loss [kg/kg DM per day]
    """
    if is_strict(strict):
        require_fraction("dry_matter_fraction", dry_matter_fraction)
        require_positive("dm_mass", dm_mass)
        require_non_negative("elapsed_days", elapsed_days)

    volmax = max_effluent_volume(dry_matter_fraction)
    released_3 = EFFLUENT_DM_PER_LITER * volmax * effluent_fraction(EFFLUENT_EARLY_DAYS) / dm_mass
    released_79 = EFFLUENT_DM_PER_LITER * volmax * effluent_fraction(EFFLUENT_LAST_DAY) / dm_mass

    if elapsed_days <= EFFLUENT_EARLY_DAYS:
        return released_3 / EFFLUENT_EARLY_DAYS
    elif elapsed_days <= EFFLUENT_LAST_DAY:
        return (released_79 - released_3) / (EFFLUENT_LAST_DAY - EFFLUENT_EARLY_DAYS)

    logger.debug("no effluent loss defined %s days after sealing", elapsed_days)
    return 0.0
