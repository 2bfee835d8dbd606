"""Bounding boxes of leg geometry in projected map units."""

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from otp_itineraries.domain.geometry.projection import project
from otp_itineraries.domain.models.bounding_rect import BoundingRect
from otp_itineraries.domain.models.coordinate import Coordinate

if TYPE_CHECKING:
    from otp_itineraries.domain.models.leg import Leg


def bounding_rect_for_coordinates(coordinates: Iterable[Coordinate]) -> BoundingRect | None:
    """Smallest projected rectangle enclosing the coordinates.

    Returns None when there are no coordinates. A single coordinate yields a
    zero-area rectangle at its projected position.
    """
    points = [project(coordinate) for coordinate in coordinates]
    if not points:
        return None

    min_x = min(p.x for p in points)
    max_x = max(p.x for p in points)
    min_y = min(p.y for p in points)
    max_y = max(p.y for p in points)
    return BoundingRect(
        origin_x=min_x,
        origin_y=min_y,
        width=max_x - min_x,
        height=max_y - min_y,
    )


def route_coordinates(legs: Sequence["Leg"], include_merged: bool = False) -> list[Coordinate]:
    """All decoded coordinates of all legs, in travel order.

    Legs with empty or malformed geometry contribute nothing.
    """
    coordinates: list[Coordinate] = []
    for leg in legs:
        coordinates.extend(leg.decode_polyline(include_merged=include_merged))
    return coordinates


def leg_bounding_box(leg: "Leg", include_merged: bool = False) -> BoundingRect | None:
    """Bounding box of a single leg's geometry."""
    return bounding_rect_for_coordinates(leg.decode_polyline(include_merged=include_merged))


def calculate_bounding_box(
    legs: Sequence["Leg"], include_merged: bool = False
) -> BoundingRect | None:
    """Bounding box enclosing the geometry of every leg.

    By default only each leg's own `geometry` is used, so a merged leg
    contributes just the polyline of the first leg it was built from. Pass
    include_merged=True to also reduce the polylines it absorbed.
    """
    return bounding_rect_for_coordinates(route_coordinates(legs, include_merged=include_merged))
