"""Tests for relevant legs."""

import logging

import pytest

from otp_itineraries.domain.legs import filter_negligible_walks, relevant_legs
from tests.fixtures import make_bus_leg, make_itinerary, make_leg


def test_relevant_legs_drops_short_walk() -> None:
    """Given a 30s walk and a 120s walk, when computing relevant legs, then only the long walk remains."""
    itinerary = make_itinerary([make_leg("WALK", duration=30), make_leg("WALK", duration=120)])

    relevant = itinerary.relevant_legs

    assert len(relevant) == 1
    assert relevant[0].duration_seconds == 120


@pytest.mark.parametrize(("duration", "kept"), [(59, False), (60, True), (61, True)])
def test_walk_threshold_boundary(duration: int, kept: bool) -> None:
    """Given walks around 60s, when filtering, then exactly 60s is kept."""
    assert (len(relevant_legs([make_leg("WALK", duration=duration)])) == 1) is kept


def test_short_transit_leg_is_kept() -> None:
    """Given a 30s bus leg, when computing relevant legs, then it is kept."""
    assert len(relevant_legs([make_bus_leg("12", duration=30)])) == 1


def test_relevant_legs_merges_consecutive_same_route() -> None:
    """Given two route 12 bus legs, when computing relevant legs, then they become one."""
    first = make_bus_leg("12", from_name="Stop A", to_name="Stop B")
    second = make_bus_leg("12", start_offset=300, from_name="Stop B", to_name="Stop C")

    relevant = make_itinerary([first, second]).relevant_legs

    assert len(relevant) == 1
    merged = relevant[0]
    assert merged.route == "12"
    assert merged.from_place.name == "Stop A"
    assert merged.to_place.name == "Stop C"
    assert merged.duration_seconds == 600
    assert merged.distance_meters == 2000
    assert merged.start_time == first.start_time
    assert merged.end_time == second.end_time


def test_relevant_legs_keeps_different_routes() -> None:
    """Given route 12 then route 10, when computing relevant legs, then both remain."""
    relevant = make_itinerary([make_bus_leg("12"), make_bus_leg("10")]).relevant_legs

    assert len(relevant) == 2
    assert relevant[0].route == "12"
    assert relevant[1].route == "10"


def test_relevant_legs_keeps_legs_without_route() -> None:
    """Given two transit legs with no route, when computing relevant legs, then both remain."""
    relevant = make_itinerary([make_bus_leg(None), make_bus_leg(None)]).relevant_legs

    assert len(relevant) == 2


def test_relevant_legs_handles_mixed_legs() -> None:
    """Given walk 120s, bus 12, bus 12, when computing relevant legs, then walk and one merged bus remain."""
    walk = make_leg("WALK", duration=120)
    legs = [walk, make_bus_leg("12", start_offset=120), make_bus_leg("12", start_offset=420)]

    relevant = relevant_legs(legs)

    assert len(relevant) == 2
    assert relevant[0] == walk
    assert relevant[1].mode == "BUS"
    assert relevant[1].duration_seconds == 600


def test_relevant_legs_merges_across_dropped_short_walk() -> None:
    """Given bus 12, a 30s walk, bus 12, when computing relevant legs, then the walk is dropped before merging."""
    legs = [make_bus_leg("12"), make_leg("WALK", duration=30), make_bus_leg("12")]

    relevant = relevant_legs(legs)

    assert len(relevant) == 1
    assert relevant[0].duration_seconds == 600


def test_relevant_legs_of_empty_or_fully_filtered_input_is_empty() -> None:
    """Given no legs or only short walks, when computing relevant legs, then the result is empty."""
    assert relevant_legs([]) == []
    assert make_itinerary([make_leg("WALK", duration=10)]).relevant_legs == []


def test_relevant_legs_with_custom_threshold() -> None:
    """Given a 120s threshold, when filtering, then a 90s walk is dropped."""
    legs = [make_leg("WALK", duration=90), make_leg("WALK", duration=150)]

    assert [leg.duration_seconds for leg in filter_negligible_walks(legs, 120)] == [150]


def test_relevant_legs_logs_reduction(caplog: pytest.LogCaptureFixture) -> None:
    """Given legs that are merged, when computing relevant legs, then the reduction is logged at debug."""
    with caplog.at_level(logging.DEBUG, logger="otp_itineraries.domain.legs"):
        relevant_legs([make_bus_leg("12"), make_bus_leg("12")])

    assert "Reduced 2 legs to 1 relevant legs" in caplog.text
