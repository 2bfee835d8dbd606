"""Domain layer - itinerary models, geometry and leg operations."""

from otp_itineraries.domain.models import (
    BoundingRect,
    Coordinate,
    Itinerary,
    Leg,
    MapPoint,
    Place,
    Plan,
)
from otp_itineraries.domain.ports import PlanSource

__all__ = [
    "BoundingRect",
    "Coordinate",
    "Itinerary",
    "Leg",
    "MapPoint",
    "Place",
    "Plan",
    "PlanSource",
]
