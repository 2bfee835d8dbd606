"""Itinerary domain model."""

from dataclasses import dataclass
from datetime import datetime

from otp_itineraries.domain.geometry.bounding_box import calculate_bounding_box
from otp_itineraries.domain.legs.itinerary_normalizer import relevant_legs
from otp_itineraries.domain.models.bounding_rect import BoundingRect
from otp_itineraries.domain.models.leg import Leg


@dataclass(frozen=True)
class Itinerary:
    """One routing option: an ordered sequence of legs from origin to destination."""

    duration_seconds: int
    start_time: datetime
    end_time: datetime
    legs: tuple[Leg, ...]
    walk_time: int = 0  # minutes
    transit_time: int = 0  # minutes
    waiting_time: int = 0  # minutes
    walk_distance: float = 0.0  # meters
    walk_limit_exceeded: bool = False
    elevation_lost: float = 0.0
    elevation_gained: float = 0.0
    transfers: int = 0

    @property
    def relevant_legs(self) -> list[Leg]:
        """Legs to show one row each: negligible walks dropped, same-ride legs merged."""
        return relevant_legs(self.legs)

    @property
    def bounding_box(self) -> BoundingRect | None:
        """Projected rectangle enclosing every leg's geometry, None without geometry."""
        return calculate_bounding_box(self.legs)
