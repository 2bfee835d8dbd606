"""Domain models for trip itineraries."""

# Import order matters: geometry and leg helpers import the leaf models directly.
from otp_itineraries.domain.models.coordinate import Coordinate, MapPoint
from otp_itineraries.domain.models.bounding_rect import BoundingRect
from otp_itineraries.domain.models.camera_region import CameraRegion
from otp_itineraries.domain.models.place import Place
from otp_itineraries.domain.models.step import Step
from otp_itineraries.domain.models.plan_error import PlanError, PlanErrorCode
from otp_itineraries.domain.models.leg import Leg, RouteType
from otp_itineraries.domain.models.itinerary import Itinerary
from otp_itineraries.domain.models.plan import Plan

__all__ = [
    "BoundingRect",
    "CameraRegion",
    "Coordinate",
    "Itinerary",
    "Leg",
    "MapPoint",
    "Place",
    "Plan",
    "PlanError",
    "PlanErrorCode",
    "RouteType",
    "Step",
]
