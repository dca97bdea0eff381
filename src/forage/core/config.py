from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# .env file is in the project root (parent of src/)
# Only use if it exists (CI uses environment variables directly)
# Path: core/config.py -> forage -> src -> project root -> .env
_ENV_FILE = Path(__file__).parent.parent.parent.parent / ".env"
_ENV_FILE = _ENV_FILE if _ENV_FILE.exists() else None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FORAGE_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Empirical constants, Rotz et al. (2014)
    application_rate: float = 0.0  # AR, chemical application rate [g g-1 DM]
    rain_absorption_rate: float = 150.0  # WRR, rain moisture absorption [g m-2 mm-1]
    dew_absorption_rate: float = -4.0  # WRD, dew moisture absorption [g m-2 h-1]

    # Default crop/soil conditions for the forage-harvest command line
    reference_dry_bulb_c: float = 20.0  # °C
    reference_soil_moisture: float = 0.2  # kg kg-1
    reference_swath_density: float = 500.0  # g DM m-2

    # Fail fast on physically invalid inputs instead of propagating NaN/inf
    strict_validation: bool = False

    # Display units for CLI output ("imperial" = °F/inches, "metric" = °C/mm)
    # Note: all calculations use metric internally
    display_units: Literal["imperial", "metric"] = "metric"


settings = Settings()


@dataclass(frozen=True)
class ModelConstants:
    """Model-wide empirical constants of the drying and rewetting equations."""

    application_rate: float = 0.0  # AR [g g-1 DM]
    rain_absorption_rate: float = 150.0  # WRR [g m-2 mm-1]
    dew_absorption_rate: float = -4.0  # WRD [g m-2 h-1]

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> "ModelConstants":
        """Build constants from settings (module settings if not given)."""
        source = source or settings
        return cls(
            application_rate=source.application_rate,
            rain_absorption_rate=source.rain_absorption_rate,
            dew_absorption_rate=source.dew_absorption_rate,
        )
