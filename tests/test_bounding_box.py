"""Tests for bounding box calculation."""

import pytest

from otp_itineraries.domain.geometry import (
    calculate_bounding_box,
    encode_coordinates,
    leg_bounding_box,
    project,
    route_coordinates,
)
from otp_itineraries.domain.legs import merge_legs
from otp_itineraries.domain.models import Coordinate
from tests.fixtures import make_bus_leg, make_itinerary, make_leg

SEATTLE = Coordinate(47.6062, -122.3321)
PORTLAND = Coordinate(45.5152, -122.6784)
NEW_YORK = Coordinate(40.7128, -74.0060)


def test_bounding_box_is_none_without_legs() -> None:
    """Given no legs, when calculating the bounding box, then there is none."""
    assert calculate_bounding_box([]) is None


def test_bounding_box_is_none_for_empty_geometry() -> None:
    """Given an itinerary whose legs have empty polylines, when reading its bounding box, then it is None."""
    itinerary = make_itinerary([make_leg(geometry=""), make_leg(geometry="")])

    assert itinerary.bounding_box is None


def test_bounding_box_is_none_for_malformed_geometry() -> None:
    """Given only malformed polylines, when calculating the bounding box, then it is None."""
    assert calculate_bounding_box([make_leg(geometry="polyline1")]) is None


def test_bounding_box_for_single_coordinate() -> None:
    """Given a single-point polyline, when calculating the bounding box, then it is a zero-area box at the point."""
    itinerary = make_itinerary([make_leg(geometry="_p~iF~ps|U")])

    box = itinerary.bounding_box

    assert box is not None
    assert box.width == 0
    assert box.height == 0
    expected = project(Coordinate(38.5, -120.2))
    assert box.origin_x == pytest.approx(expected.x)
    assert box.origin_y == pytest.approx(expected.y)


def test_bounding_box_for_two_coordinates() -> None:
    """Given Seattle to Portland, when calculating the bounding box, then it spans the projected delta."""
    itinerary = make_itinerary([make_leg(geometry=encode_coordinates([SEATTLE, PORTLAND]))])
    seattle = project(SEATTLE)
    portland = project(PORTLAND)

    box = itinerary.bounding_box

    assert box is not None
    assert box.width == pytest.approx(abs(seattle.x - portland.x), abs=0.1)
    assert box.height == pytest.approx(abs(seattle.y - portland.y), abs=0.1)
    assert box.origin_x == pytest.approx(min(seattle.x, portland.x), abs=0.1)
    assert box.origin_y == pytest.approx(min(seattle.y, portland.y), abs=0.1)


def test_bounding_box_encloses_all_legs() -> None:
    """Given several legs, when calculating the bounding box, then every point of every leg is inside."""
    walk = [Coordinate(47.6805, -122.3321), Coordinate(47.6810, -122.3325), Coordinate(47.6815, -122.3330)]
    bus = [Coordinate(47.6815, -122.3330), Coordinate(47.6900, -122.3400), Coordinate(47.7000, -122.3500)]
    legs = [
        make_leg(geometry=encode_coordinates(walk)),
        make_bus_leg(geometry=encode_coordinates(bus)),
    ]

    box = calculate_bounding_box(legs)

    assert box is not None
    assert box.width > 0
    assert box.height > 0
    points = [project(c) for c in walk + bus]
    for point in points:
        assert box.contains(point, tolerance=1.0)
    assert box.origin_x == pytest.approx(min(p.x for p in points))
    assert box.max_y == pytest.approx(max(p.y for p in points))


def test_bounding_box_does_not_depend_on_leg_order() -> None:
    """Given the same legs in reverse order, when calculating the bounding box, then it is unchanged."""
    legs = [
        make_leg(geometry=encode_coordinates([SEATTLE])),
        make_leg(geometry=""),
        make_leg(geometry=encode_coordinates([PORTLAND, NEW_YORK])),
    ]

    assert calculate_bounding_box(legs) == calculate_bounding_box(list(reversed(legs)))


def test_bounding_box_skips_legs_without_geometry() -> None:
    """Given one leg with and one without geometry, when calculating, then only the first counts."""
    legs = [make_leg(geometry=""), make_leg(geometry=encode_coordinates([SEATTLE, PORTLAND]))]

    assert calculate_bounding_box(legs) == calculate_bounding_box(legs[1:])


def test_bounding_box_for_continental_span() -> None:
    """Given Seattle to New York, when calculating the bounding box, then it is continental in size."""
    itinerary = make_itinerary([make_leg(geometry=encode_coordinates([SEATTLE, NEW_YORK]))])

    box = itinerary.bounding_box

    assert box is not None
    assert box.width > 1_000_000
    assert box.height > 100_000


def test_leg_bounding_box_uses_only_that_leg() -> None:
    """Given a leg, when calculating its own bounding box, then other legs do not matter."""
    leg = make_leg(geometry=encode_coordinates([SEATTLE, PORTLAND]))

    assert leg_bounding_box(leg) == calculate_bounding_box([leg])
    assert leg_bounding_box(make_leg(geometry="")) is None


def test_merged_leg_geometry_only_covers_first_leg_by_default() -> None:
    """Given a merged leg, when calculating its bounding box, then only the first polyline counts unless asked."""
    first = make_bus_leg(geometry=encode_coordinates([SEATTLE, PORTLAND]))
    second = make_bus_leg(geometry=encode_coordinates([PORTLAND, NEW_YORK]), start_offset=300)
    merged = merge_legs(first, second)

    truncated = calculate_bounding_box([merged])
    full = calculate_bounding_box([merged], include_merged=True)

    assert truncated == calculate_bounding_box([first])
    assert full == calculate_bounding_box([first, second])
    assert full is not None and truncated is not None
    assert full.width > truncated.width


def test_route_coordinates_concatenates_in_travel_order() -> None:
    """Given several legs, when collecting route coordinates, then points follow leg order."""
    legs = [
        make_leg(geometry=encode_coordinates([SEATTLE])),
        make_leg(geometry=""),
        make_leg(geometry=encode_coordinates([PORTLAND, NEW_YORK])),
    ]

    assert route_coordinates(legs) == [SEATTLE, PORTLAND, NEW_YORK]
