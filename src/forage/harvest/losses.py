"""
Dry matter losses during field curing and harvest.

Each function returns a loss as a fraction of forage dry matter [kg/kg].
Moisture inputs are on fresh-matter basis [kg H2O / kg FM], typically the
first and last values of a curing() series.

References:
-----------
[1] Rotz, C.A. (1995). "Loss models for forage harvest"
    Transactions of the ASAE 38(6):1621-1631

[2] Rotz, C.A. et al. (2014). "The integrated farm system model: reference
    manual version 4.1" USDA-ARS

[3] McGechan, M.B. (1989). "A review of losses arising during conservation
    of grass forage: part 1, field losses" J. Agric. Eng. Res. 44:1-21
"""

import math
from typing import TypedDict

from forage.core.validation import (
    InvalidInputError,
    is_strict,
    require_fraction,
    require_non_negative,
    require_positive,
)

# Loss reduction for unconditioned forage
RAIN_UNCONDITIONED_FACTOR = 0.8  # less leaching from intact stems
MOWER_UNCONDITIONED_FACTOR = 0.5  # mower without conditioner


def loss_respiration(
    m_initial: float,
    m_final: float,
    avg_temp: float,
    curing_hours: float,
    strict: bool | None = None,
) -> float:
    """
    Respiration loss during field curing, eq. 3 [1].

    The formula divides by (m_initial - m_final), so equal moistures raise
    ZeroDivisionError unless strict validation rejects them first.

    Args:
        m_initial: Moisture at the start of curing [kg H2O / kg FM]
        m_final: Moisture at the end of curing [kg H2O / kg FM]
        avg_temp: Average air temperature during curing (°C)
        curing_hours: Field curing time (h)
        strict: Validate inputs (settings.strict_validation if None)

    Returns:
        Respiration loss [kg/kg DM]
    """
    if is_strict(strict):
        require_fraction("m_initial", m_initial, include_one=False)
        require_fraction("m_final", m_final, include_one=False)
        require_non_negative("curing_hours", curing_hours)
        if m_initial == m_final:
            raise InvalidInputError("m_final", m_final, "must differ from m_initial")

    return 0.000047 * avg_temp * curing_hours * (m_initial**3.6 - m_final**3.6) / (m_initial - m_final)


def loss_rain(
    m_initial: float,
    conditioned: bool,
    ndf: float,
    rainfall: float,
    swath_density: float,
    strict: bool | None = None,
) -> float:
    """
    Leaching loss caused by rain on the swath [1, 2].

    Args:
        m_initial: Moisture when the rain falls [kg H2O / kg FM]
        conditioned: Forage was conditioned at mowing
        ndf: Neutral detergent fiber fraction of the forage (0-1)
        rainfall: Rainfall (mm)
        swath_density: Swath density (g DM/m²)
        strict: Validate inputs (settings.strict_validation if None)

    Returns:
        Leaching loss [kg/kg DM]
    """
    if is_strict(strict):
        require_fraction("m_initial", m_initial, include_one=False)
        require_fraction("ndf", ndf)
        require_non_negative("rainfall", rainfall)
        require_positive("swath_density", swath_density)

    f_c = 1.0 if conditioned else RAIN_UNCONDITIONED_FACTOR
    return (f_c * 0.0061 * (1 - ndf) * (0.9 - m_initial) * rainfall) / (swath_density / 1000)


def loss_mowing(
    stage_factor: float,
    conditioned: bool,
    legume_fraction: float,
    strict: bool | None = None,
) -> float:
    """
    Shatter loss caused by mowing and conditioning, eq. 8 [1].

    Args:
        stage_factor: Crop maturity stage factor
        conditioned: Mower-conditioner (True) or plain mower (False)
        legume_fraction: Fraction of forage dry matter that is legume leaf (0-1)
        strict: Validate inputs (settings.strict_validation if None)

    Returns:
        Mowing loss [kg/kg DM]
    """
    if is_strict(strict):
        require_non_negative("stage_factor", stage_factor)
        require_fraction("legume_fraction", legume_fraction)

    f_m = 1.0 if conditioned else MOWER_UNCONDITIONED_FACTOR
    return f_m * 0.006 * (1 + 2 * legume_fraction) * stage_factor


def loss_tedding(m_initial: float, legume_fraction: float, strict: bool | None = None) -> float:
    """Shatter loss caused by tedding, eq. 10 [1]. Drier forage shatters more."""
    if is_strict(strict):
        require_fraction("m_initial", m_initial, include_one=False)
        require_fraction("legume_fraction", legume_fraction)

    return 0.044 * (1 + 6 * legume_fraction) * (1 - m_initial**1.5)


def loss_raking(
    m_initial: float,
    legume_fraction: float,
    swath_density: float,
    strict: bool | None = None,
) -> float:
    """Shatter loss caused by raking, eq. 13 [1]. Light swaths lose more."""
    if is_strict(strict):
        require_fraction("m_initial", m_initial, include_one=False)
        require_fraction("legume_fraction", legume_fraction)
        require_positive("swath_density", swath_density)

    return (0.02 * (1 + 2 * legume_fraction) * (1 - m_initial**1.5)) / (swath_density / 1000)


# -----------------------------------------------------------------------------
# Combined Harvest Losses
# -----------------------------------------------------------------------------


class HarvestLosses(TypedDict):
    """Loss components of one curing event [kg/kg DM]."""

    respiration: float
    rain: float
    mowing: float
    tedding: float
    raking: float
    total: float


def estimate_harvest_losses(
    m_initial: float,
    m_final: float,
    avg_temp: float,
    curing_hours: float,
    *,
    conditioned: bool,
    ndf: float,
    rainfall: float,
    swath_density: float,
    stage_factor: float,
    legume_fraction: float,
    tedded: bool = False,
    raked: bool = False,
    tedding_moisture: float | None = None,
    raking_moisture: float | None = None,
    strict: bool | None = None,
) -> HarvestLosses:
    """
    Evaluate all harvest loss components for one curing event.

    When moisture did not change, respiration takes the limit of the
    respiration equation, 0.000047 T t 3.6 m^2.6. Tedding and raking
    losses only apply when the operation was performed; tedding defaults to
    the initial moisture and raking to the final moisture.

    Returns:
        HarvestLosses with each component and their sum
    """
    if math.isclose(m_initial, m_final):
        respiration = 0.000047 * avg_temp * curing_hours * 3.6 * m_initial**2.6
    else:
        respiration = loss_respiration(m_initial, m_final, avg_temp, curing_hours, strict=strict)

    rain = loss_rain(m_initial, conditioned, ndf, rainfall, swath_density, strict=strict)
    mowing = loss_mowing(stage_factor, conditioned, legume_fraction, strict=strict)

    tedding = 0.0
    if tedded:
        moisture = m_initial if tedding_moisture is None else tedding_moisture
        tedding = loss_tedding(moisture, legume_fraction, strict=strict)

    raking = 0.0
    if raked:
        moisture = m_final if raking_moisture is None else raking_moisture
        raking = loss_raking(moisture, legume_fraction, swath_density, strict=strict)

    return HarvestLosses(
        respiration=respiration,
        rain=rain,
        mowing=mowing,
        tedding=tedding,
        raking=raking,
        total=respiration + rain + mowing + tedding + raking,
    )
