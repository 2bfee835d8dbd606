"""Itinerary display service."""

import logging
from dataclasses import dataclass

from otp_itineraries.domain.geometry.bounding_box import calculate_bounding_box, route_coordinates
from otp_itineraries.domain.geometry.camera import DEFAULT_PADDING, fit_camera_region
from otp_itineraries.domain.legs.itinerary_normalizer import (
    DEFAULT_MIN_WALK_DURATION_SECONDS,
    relevant_legs,
)
from otp_itineraries.domain.models import (
    BoundingRect,
    CameraRegion,
    Coordinate,
    Itinerary,
    Leg,
    Place,
    Plan,
)
from otp_itineraries.domain.ports.plan_source import PlanSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItineraryDisplay:
    """Everything the directions list and the map need for one itinerary."""

    itinerary: Itinerary
    relevant_legs: list[Leg]
    leg_paths: list[list[Coordinate]]  # decoded polyline per relevant leg
    bounding_box: BoundingRect | None
    camera_region: CameraRegion | None


class ItineraryDisplayService:
    """Service preparing itineraries for display."""

    def __init__(
        self,
        plan_source: PlanSource,
        min_walk_duration_seconds: int = DEFAULT_MIN_WALK_DURATION_SECONDS,
        include_merged_geometry: bool = False,
        camera_padding_factor: float = DEFAULT_PADDING,
    ) -> None:
        """Initialize with a plan source and display settings.

        Args:
            plan_source: Where plans are loaded from.
            min_walk_duration_seconds: Shorter WALK legs are not shown.
            include_merged_geometry: Draw merged legs with the polylines of every leg
                they were built from instead of only the first one.
            camera_padding_factor: Multiplier for the fitted camera span.
        """
        self._plan_source = plan_source
        self._min_walk_duration_seconds = min_walk_duration_seconds
        self._include_merged_geometry = include_merged_geometry
        self._camera_padding_factor = camera_padding_factor

    def load_plan(self) -> Plan:
        plan = self._plan_source.load_plan()
        logger.info(
            f"Loaded plan from {plan.from_place.name or 'origin'} to "
            f"{plan.to_place.name or 'destination'} with {len(plan.itineraries)} itineraries"
        )
        return plan

    def display_itinerary(
        self,
        itinerary: Itinerary,
        origin: Place | None = None,
        destination: Place | None = None,
    ) -> ItineraryDisplay:
        """Build display data for one itinerary.

        Bounding box and camera region are computed from the itinerary's own
        legs, before merging, so every polyline counts. The camera region also
        covers origin and destination when given.
        """
        legs = relevant_legs(itinerary.legs, self._min_walk_duration_seconds)
        leg_paths = [
            leg.decode_polyline(include_merged=self._include_merged_geometry) for leg in legs
        ]
        bounding_box = calculate_bounding_box(itinerary.legs)
        if bounding_box is None:
            logger.debug("Itinerary has no geometry; skipping bounding box")

        coordinates = []
        if origin is not None:
            coordinates.append(origin.coordinate)
        coordinates.extend(route_coordinates(itinerary.legs))
        if destination is not None:
            coordinates.append(destination.coordinate)

        return ItineraryDisplay(
            itinerary=itinerary,
            relevant_legs=legs,
            leg_paths=leg_paths,
            bounding_box=bounding_box,
            camera_region=fit_camera_region(coordinates, self._camera_padding_factor),
        )

    def display_plan(self) -> list[ItineraryDisplay]:
        """Load the plan and build display data for each of its itineraries."""
        plan = self.load_plan()
        return [
            self.display_itinerary(itinerary, plan.from_place, plan.to_place)
            for itinerary in plan.itineraries
        ]
