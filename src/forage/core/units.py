"""Unit conversion utilities using pint.

All model inputs and outputs are metric:
- Temperature: Celsius (°C)
- Rainfall: millimeters (mm)
- Swath density: grams dry matter per square meter (g/m²)
- Dry matter in store: metric tonnes (t)
- Moisture and losses: dimensionless fractions (kg/kg)

Display units are controlled by settings.display_units:
- "metric": Display as stored (°C, mm, g/m², t)
- "imperial": Convert to °F, inches, lb/acre, short tons

Note: Temperature conversions use simple formulas rather than pint's
offset unit handling, which has ambiguity issues with multiplication.
"""

import pint

from forage.core.config import settings

# Create a unit registry (lazily initialized)
_ureg: pint.UnitRegistry | None = None


def get_ureg() -> pint.UnitRegistry:
    """Get the pint unit registry (lazily initialized)."""
    global _ureg
    if _ureg is None:
        _ureg = pint.UnitRegistry()
    return _ureg


def is_imperial() -> bool:
    """Check if display units are imperial."""
    return settings.display_units == "imperial"


# =============================================================================
# Temperature
# =============================================================================


def celsius_to_fahrenheit(temp_c: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return temp_c * 9 / 5 + 32


def format_temp(temp_c: float, decimals: int = 0) -> str:
    """Format temperature for display.

    Args:
        temp_c: Temperature in Celsius
        decimals: Number of decimal places

    Returns:
        Formatted string like "68°F" or "20°C"
    """
    if is_imperial():
        return f"{celsius_to_fahrenheit(temp_c):.{decimals}f}°F"
    return f"{temp_c:.{decimals}f}°C"


# =============================================================================
# Rainfall
# =============================================================================


def format_rain(mm: float) -> str:
    """Format rainfall for display, e.g. '0.20"' or '5.0mm'."""
    if is_imperial():
        inches = (mm * get_ureg().mm).to("inch").magnitude
        return f'{inches:.2f}"'
    return f"{mm:.1f}mm"


# =============================================================================
# Swath density and stored mass
# =============================================================================


def swath_density_to_kg_ha(g_m2: float) -> float:
    """Convert swath density from g/m² to kg/ha."""
    ureg = get_ureg()
    return (g_m2 * ureg("g / m**2")).to("kg / hectare").magnitude


def format_swath_density(g_m2: float) -> str:
    """Format swath density for display, e.g. '500 g/m² (5000 kg/ha)' or '4461 lb/ac'."""
    if is_imperial():
        ureg = get_ureg()
        lb_ac = (g_m2 * ureg("g / m**2")).to("lb / acre").magnitude
        return f"{lb_ac:.0f} lb/ac"
    return f"{g_m2:.0f} g/m² ({swath_density_to_kg_ha(g_m2):.0f} kg/ha)"


def format_mass(tonnes: float) -> str:
    """Format stored dry matter, e.g. '100.0 t' or '110.2 ton'."""
    if is_imperial():
        short_tons = (tonnes * get_ureg().metric_ton).to("short_ton").magnitude
        return f"{short_tons:.1f} ton"
    return f"{tonnes:.1f} t"


# =============================================================================
# Fractions
# =============================================================================


def format_fraction(value: float, decimals: int = 2) -> str:
    """Format a dimensionless fraction as a percentage, e.g. '3.25%'."""
    return f"{value * 100:.{decimals}f}%"
