"""Step domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Step:
    """A turn-by-turn navigation instruction within a leg."""

    distance: float
    street_name: str
    latitude: float
    longitude: float
    relative_direction: str | None = None  # e.g. "LEFT", "RIGHT", "CONTINUE"
    elevation_change: float | None = None
