"""Builders for domain objects used across tests."""

from datetime import UTC, datetime, timedelta

from otp_itineraries.domain.models import Itinerary, Leg, Place

BASE_TIME = datetime(2024, 8, 10, 9, 0, tzinfo=UTC)


def make_place(name: str = "Stop", lat: float = 47.6, lon: float = -122.3) -> Place:
    return Place(name=name, latitude=lat, longitude=lon, vertex_type="NORMAL")


def make_leg(
    mode: str = "WALK",
    duration: int = 600,
    distance: float = 100.0,
    route: str | None = None,
    transit_leg: bool | None = False,
    geometry: str = "",
    start_offset: int = 0,
    from_name: str = "Start",
    to_name: str = "End",
    **kwargs,
) -> Leg:
    start = BASE_TIME + timedelta(seconds=start_offset)
    return Leg(
        mode=mode,
        start_time=start,
        end_time=start + timedelta(seconds=duration),
        from_place=make_place(from_name),
        to_place=make_place(to_name),
        distance_meters=distance,
        duration_seconds=duration,
        geometry=geometry,
        route=route,
        transit_leg=transit_leg,
        **kwargs,
    )


def make_bus_leg(route: str | None = "12", duration: int = 300, **kwargs) -> Leg:
    kwargs.setdefault("distance", 1000.0)
    kwargs.setdefault("transit_leg", True)
    return make_leg(mode="BUS", route=route, duration=duration, **kwargs)


def make_itinerary(legs: list[Leg]) -> Itinerary:
    duration = sum(leg.duration_seconds for leg in legs)
    return Itinerary(
        duration_seconds=duration,
        start_time=BASE_TIME,
        end_time=BASE_TIME + timedelta(seconds=duration),
        legs=tuple(legs),
    )
