"""Merging of adjacent legs that belong to one ride on one vehicle."""

from collections.abc import Iterable
from dataclasses import replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from otp_itineraries.domain.models.leg import Leg


def should_merge_legs(earlier: "Leg", later: "Leg") -> bool:
    """Whether two consecutive legs are the same transit ride.

    Both legs need a route, the same route, and transit_leg set to True.
    Two legs without a route are never merged.
    """
    return (
        earlier.route is not None
        and later.route is not None
        and earlier.route == later.route
        and earlier.transit_leg is True
        and later.transit_leg is True
    )


def merge_legs(earlier: "Leg", later: "Leg") -> "Leg":
    """Combine two legs into a new one.

    Timing ends and destination come from the later leg, distance and duration
    are summed, and every other field is the earlier leg's. `geometry` stays
    the earlier leg's polyline; the later polylines are kept in
    `merged_geometry` for callers that want the full path.
    """
    return replace(
        earlier,
        end_time=later.end_time,
        to_place=later.to_place,
        distance_meters=earlier.distance_meters + later.distance_meters,
        duration_seconds=earlier.duration_seconds + later.duration_seconds,
        merged_geometry=(*earlier.merged_geometry, later.geometry, *later.merged_geometry),
    )


def merge_adjacent_legs(legs: Iterable["Leg"]) -> list["Leg"]:
    """Merge runs of strictly adjacent same-ride legs in a single pass.

    A leg that cannot be merged ends the current run; legs are never
    reordered and never merged across a different leg.
    """
    merged: list[Leg] = []
    current: Leg | None = None

    for leg in legs:
        if current is None:
            current = leg
        elif should_merge_legs(current, leg):
            current = merge_legs(current, leg)
        else:
            merged.append(current)
            current = leg

    if current is not None:
        merged.append(current)
    return merged
