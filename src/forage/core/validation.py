"""Opt-in input validation for the curing and loss equations.

The equations themselves let invalid inputs propagate as numeric anomalies
(inf, NaN, ZeroDivisionError). Callers that prefer early detection pass
``strict=True`` (or set ``FORAGE_STRICT_VALIDATION=true``) and get an
``InvalidInputError`` naming the offending value instead.
"""

from forage.core.config import settings


class InvalidInputError(ValueError):
    """Raised when an input violates a physical constraint of the model."""

    def __init__(self, name: str, value: object, constraint: str):
        self.name = name
        self.value = value
        self.constraint = constraint
        super().__init__(f"{name}={value!r} violates constraint: {constraint}")


def is_strict(strict: bool | None) -> bool:
    """Resolve a per-call ``strict`` flag against settings.strict_validation."""
    if strict is None:
        return settings.strict_validation
    return strict


def require_range(
    name: str,
    value: float,
    low: float,
    high: float,
    include_high: bool = True,
) -> float:
    """Require low <= value <= high (or < high when include_high is False)."""
    upper_ok = value <= high if include_high else value < high
    if not (value >= low and upper_ok):
        bracket = "]" if include_high else ")"
        raise InvalidInputError(name, value, f"must be in [{low}, {high}{bracket}")
    return value


def require_fraction(name: str, value: float, include_one: bool = True) -> float:
    """Require a fraction in [0, 1], or [0, 1) when include_one is False."""
    return require_range(name, value, 0.0, 1.0, include_high=include_one)


def require_positive(name: str, value: float) -> float:
    if not value > 0:
        raise InvalidInputError(name, value, "must be > 0")
    return value


def require_non_negative(name: str, value: float) -> float:
    if not value >= 0:
        raise InvalidInputError(name, value, "must be >= 0")
    return value
