"""
Field curing model for mown forage.

Simulates the hourly moisture decline of a cut swath through one day:
- Base drying rate from insolation, temperature, soil moisture and swath density
- Slower drying of unconditioned first and second cuts
- Overnight rewetting by rain and dew on continuation days
- Diurnal variation of the drying rate (slow mornings, fast midday)

Moisture is tracked on dry-matter basis [kg H2O / kg DM] internally and
returned on fresh-matter basis [kg H2O / kg FM].

References:
-----------
[1] Rotz, C.A. and Chen, Y. (1985). "Alfalfa drying model for the field
    environment" Transactions of the ASAE 28(5):1686-1691

[2] Rotz, C.A. (1985). "Economics of chemically conditioned alfalfa on
    Michigan dairy farms" Transactions of the ASAE 28(4):1024-1030

[3] Rotz, C.A., Abrams, S.M. and Davis, R.J. (1987). "Alfalfa drying, loss
    and quality as influenced by mechanical and chemical conditioning"
    Transactions of the ASAE 30(3):630-635

[4] Rotz, C.A. et al. (2014). "The integrated farm system model: reference
    manual version 4.1" USDA-ARS
"""

import logging
import math
from typing import TypedDict

from forage.core.config import ModelConstants
from forage.core.validation import (
    InvalidInputError,
    is_strict,
    require_fraction,
    require_non_negative,
    require_positive,
    require_range,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

# Rewetted swaths approach this moisture content [kg H2O / kg DM]
SATURATION_MOISTURE = 4.0

# Drying rate multipliers for unconditioned forage by cut number [3]
UNCONDITIONED_CUT_FACTORS = {
    1: 0.56,
    2: 0.73,
}

# Diurnal drying rate factors, in order of the day
DIURNAL_MORNING = 0.80  # hours up to the end of the morning period
DIURNAL_MIDDAY = 1.40  # next 3 hours
DIURNAL_AFTERNOON = 1.26  # 3 hours after that
DIURNAL_EVENING = 0.70  # remainder of the day


# -----------------------------------------------------------------------------
# Moisture Basis
# -----------------------------------------------------------------------------


def to_dry_basis(moisture_fm: float) -> float:
    """Convert moisture from fresh-matter to dry-matter basis."""
    return moisture_fm / (1 - moisture_fm)


def to_fresh_basis(moisture_dm: float) -> float:
    """Convert moisture from dry-matter to fresh-matter basis."""
    return moisture_dm / (moisture_dm + 1)


# -----------------------------------------------------------------------------
# Drying Rate
# -----------------------------------------------------------------------------


def equilibrium_moisture(wind: float, rh: float) -> float:
    """
    Equilibrium moisture content of mown forage overnight, eq. 6.5 [4].

    Args:
        wind: Wind speed (m/s)
        rh: Relative humidity (0-1)

    Returns:
        Equilibrium moisture [kg H2O / kg DM]
    """
    return 0.4 + (3.6 / math.exp(0.2 * wind)) / math.exp(2.5 * (1 - rh))


def drying_rate(
    si: float,
    dry_bulb: float,
    soil_moisture: float,
    swath_density: float,
    day: int,
    constants: ModelConstants | None = None,
) -> float:
    """
    Drying rate constant, eq. 6.1 [4] after [1].

    Args:
        si: Solar insolation (W/m²)
        dry_bulb: Dry bulb temperature (°C)
        soil_moisture: Soil moisture (kg/kg)
        swath_density: Swath density (g DM/m²)
        day: 1 on the day of mowing or raking, otherwise 0
        constants: Empirical constants (from settings if not given)

    Returns:
        Drying rate constant (1/h)
    """
    ar = (constants or ModelConstants.from_settings()).application_rate
    numerator = si * (1 + 9.3 * ar) + 5.42 * dry_bulb
    denominator = 66.4 * soil_moisture + swath_density * (2.06 - 0.97 * day) * (1.55 + 21.9 * ar) + 3037
    return numerator / denominator


def adjusted_drying_rate(rate: float, conditioned: bool, cut_no: int) -> float:
    """Adjust the drying rate constant for cut number and conditioning [3].

    Conditioned forage and third or later cuts dry at the base rate.
    """
    if conditioned:
        return rate
    return rate * UNCONDITIONED_CUT_FACTORS.get(cut_no, 1.0)


def diurnal_factor(h: float, day_len: float) -> float:
    """
    Diurnal drying rate factor for an hour of the curing day.

    The morning and evening periods are each (day_len - 6) / 2 hours long.
    Both arguments are truncated to whole hours before banding.

    Args:
        h: Hours after sunrise
        day_len: Day length (hours)

    Returns:
        Multiplier on the drying rate constant
    """
    h = int(h)
    day_len = int(day_len)
    morning_len = (day_len - 6) * 0.5

    if h <= morning_len:
        return DIURNAL_MORNING
    elif h <= morning_len + 3:
        return DIURNAL_MIDDAY
    elif h <= morning_len + 6:
        return DIURNAL_AFTERNOON
    else:
        return DIURNAL_EVENING


def hourly_moisture(moisture_dm: float, rate: float, h: float, day_len: float) -> float:
    """Moisture [kg H2O / kg DM] one hour after moisture_dm, at hour h of the day."""
    return moisture_dm / math.exp(rate * diurnal_factor(h, day_len))


# -----------------------------------------------------------------------------
# Overnight Rewetting
# -----------------------------------------------------------------------------


def rain_adjusted_moisture(
    moisture_dm: float,
    swath_density: float,
    rn: float,
    constants: ModelConstants | None = None,
) -> float:
    """
    Moisture after rain [kg H2O / kg DM].

    Moisture approaches SATURATION_MOISTURE exponentially with the ratio
    of rainfall (mm) to swath density (g DM/m²).
    """
    wrr = (constants or ModelConstants.from_settings()).rain_absorption_rate
    return SATURATION_MOISTURE + (moisture_dm - SATURATION_MOISTURE) * math.exp(-wrr * rn / swath_density)


def rewetted_moisture(
    moisture_dm: float,
    swath_density: float,
    rn: float,
    wind: float,
    rh: float,
    day_len: float,
    constants: ModelConstants | None = None,
) -> float:
    """
    Morning moisture after overnight dew and rain [kg H2O / kg DM].

    Over the (24 - day_len) night hours moisture decays towards the
    equilibrium moisture content, then rain pulls it towards saturation.

    Args:
        moisture_dm: Moisture at the end of the previous day [kg H2O / kg DM]
        swath_density: Swath density (g DM/m²)
        rn: Rainfall (mm)
        wind: Wind speed (m/s)
        rh: Relative humidity (0-1)
        day_len: Day length (hours)
        constants: Empirical constants (from settings if not given)
    """
    constants = constants or ModelConstants.from_settings()
    m_e = equilibrium_moisture(wind, rh)
    night = m_e + (moisture_dm - m_e) * math.exp(constants.dew_absorption_rate * (24 - day_len) / swath_density)
    rain = math.exp(-constants.rain_absorption_rate * rn / swath_density)
    return SATURATION_MOISTURE + (night - SATURATION_MOISTURE) * rain


# -----------------------------------------------------------------------------
# Field Curing
# -----------------------------------------------------------------------------


def _validate_curing_inputs(
    M_i: float,
    si: float,
    day_len: float,
    rn: float,
    cut_no: int,
    wind: float,
    rh: float,
    soil_moisture: float,
    swath_density: float,
) -> None:
    require_fraction("M_i", M_i, include_one=False)
    require_non_negative("si", si)
    require_range("day_len", day_len, 0, 24)
    require_non_negative("rn", rn)
    if cut_no < 1:
        raise InvalidInputError("cut_no", cut_no, "must be a positive integer")
    require_non_negative("wind", wind)
    require_fraction("rh", rh, include_one=False)
    require_non_negative("soil_moisture", soil_moisture)
    require_positive("swath_density", swath_density)


def curing(
    M_i: float,
    si: float,
    day_len: float,
    rn: float,
    conditioned: bool,
    cut_no: int,
    wind: float,
    rh: float,
    mowed: bool,
    raked: bool,
    *,
    dry_bulb: float,
    soil_moisture: float,
    swath_density: float,
    constants: ModelConstants | None = None,
    strict: bool | None = None,
) -> list[float]:
    """
    Simulate hourly moisture of mown forage through one curing day.

    On any day other than the day of mowing, the starting moisture is first
    adjusted for overnight rain and dew.

    Args:
        M_i: Initial moisture [kg H2O / kg FM]
        si: Solar insolation (W/m²)
        day_len: Day length (hours, truncated to int)
        rn: Rainfall since the previous curing day (mm)
        conditioned: Forage was mechanically conditioned at mowing
        cut_no: Cut number within the season (1, 2, 3, ...)
        wind: Wind speed (m/s)
        rh: Relative humidity (0-1)
        mowed: This is the day of mowing
        raked: This is the day of raking
        dry_bulb: Dry bulb temperature (°C)
        soil_moisture: Soil moisture (kg/kg)
        swath_density: Swath density (g DM/m²)
        constants: Empirical constants (from settings if not given)
        strict: Validate inputs (settings.strict_validation if None)

    Returns:
        day_len + 1 hourly moisture values [kg H2O / kg FM], index 0 being
        the start of the day

    Raises:
        InvalidInputError: If strict and an input is physically invalid
    """
    constants = constants or ModelConstants.from_settings()

    if is_strict(strict):
        _validate_curing_inputs(M_i, si, day_len, rn, cut_no, wind, rh, soil_moisture, swath_density)

    day_len = int(day_len)
    day = 1 if (mowed or raked) else 0
    rate = adjusted_drying_rate(
        drying_rate(si, dry_bulb, soil_moisture, swath_density, day, constants),
        conditioned,
        cut_no,
    )
    logger.debug("drying rate %.4f 1/h (cut %d, conditioned=%s, day=%d)", rate, cut_no, conditioned, day)

    moisture = [to_dry_basis(M_i)]

    # Continuation day: overnight dew and rain
    if not mowed:
        rained = rain_adjusted_moisture(moisture[0], swath_density, rn, constants)
        moisture[0] = rewetted_moisture(rained, swath_density, rn, wind, rh, day_len, constants)
        logger.debug("rewetted start moisture %.3f -> %.3f kg/kg DM", to_dry_basis(M_i), moisture[0])

    for h in range(1, day_len + 1):
        moisture.append(hourly_moisture(moisture[h - 1], rate, h, day_len))

    return [to_fresh_basis(m) for m in moisture]


# -----------------------------------------------------------------------------
# Summary
# -----------------------------------------------------------------------------


class CuringSummary(TypedDict):
    """Summary of one curing day."""

    hours: int
    initial_moisture: float
    final_moisture: float
    moisture_loss: float
    rewetted: bool


def summarize_curing(series: list[float], initial_moisture: float) -> CuringSummary:
    """
    Summarize a curing series returned by curing().

    Args:
        series: Hourly moisture values [kg H2O / kg FM]
        initial_moisture: Moisture supplied to curing() [kg H2O / kg FM]

    Returns:
        CuringSummary with endpoints and whether the swath was rewetted
    """
    if not series:
        raise ValueError("series must contain at least one value")

    return CuringSummary(
        hours=len(series) - 1,
        initial_moisture=series[0],
        final_moisture=series[-1],
        moisture_loss=series[0] - series[-1],
        rewetted=series[0] > initial_moisture and not math.isclose(series[0], initial_moisture),
    )
