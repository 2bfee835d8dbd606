"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Keys of the [itinerary] TOML table that override settings.
_TOML_OVERRIDABLE = (
    "min_walk_duration_seconds",
    "include_merged_geometry",
    "camera_padding_factor",
    "distance_units",
    "timezone",
    "log_level",
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Leg normalization
    min_walk_duration_seconds: int = Field(
        default=60,
        ge=0,
        description="WALK legs shorter than this are left out of the relevant legs",
    )
    include_merged_geometry: bool = Field(
        default=False,
        description=(
            "Draw merged legs with the polylines of all legs they were built from. "
            "Off by default: a merged leg then only shows its first polyline"
        ),
    )

    # Map camera
    camera_padding_factor: float = Field(
        default=1.15,
        description="Multiplier applied to the fitted camera span",
    )

    # Display
    distance_units: str = Field(default="metric", description="'metric' or 'imperial'")
    timezone: str = Field(
        default="UTC",
        description="Timezone for displaying leg times (IANA timezone name)",
    )
    log_level: str = Field(default="INFO", description="Logging level name")

    config_file: str | None = Field(
        default=None,
        description="Optional TOML file whose [itinerary] table overrides these settings",
    )

    @field_validator("camera_padding_factor")
    @classmethod
    def validate_camera_padding_factor(cls, v: float) -> float:
        """Validate the camera span is never shrunk."""
        if v < 1.0:
            raise ValueError("camera_padding_factor must be at least 1.0")
        return v

    @field_validator("distance_units")
    @classmethod
    def validate_distance_units(cls, v: str) -> str:
        """Validate distance units are either 'metric' or 'imperial'."""
        if v.lower() not in ("metric", "imperial"):
            raise ValueError("distance_units must be either 'metric' or 'imperial'")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def apply_config_file(self) -> "AppConfig":
        """Return a copy with the [itinerary] table of config_file applied.

        Values are validated the same way as environment variables.
        """
        if not self.config_file:
            return self

        section = self._load_toml_data().get("itinerary", {})
        overrides = {key: section[key] for key in _TOML_OVERRIDABLE if key in section}
        if not overrides:
            return self
        return AppConfig(**{**self.model_dump(), **overrides})
