"""Leg domain model."""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum

from otp_itineraries.domain.geometry.polyline_codec import decode_polyline
from otp_itineraries.domain.models.coordinate import Coordinate
from otp_itineraries.domain.models.place import Place
from otp_itineraries.domain.models.step import Step


class RouteType(IntEnum):
    """GTFS route types, with -1 for legs that are not transit."""

    NON_TRANSIT = -1
    TRAM = 0
    SUBWAY = 1
    TRAIN = 2
    BUS = 3
    FERRY = 4
    CABLE_CAR = 5
    GONDOLA = 6
    FUNICULAR = 7


def parse_hex_color(value: str | None) -> tuple[float, float, float] | None:
    """Parse a "RRGGBB" or "RGB" hex string (optional leading '#') into RGB floats in [0, 1]."""
    if value is None:
        return None
    sanitized = value.strip().replace("#", "")
    try:
        rgb = int(sanitized, 16)
    except ValueError:
        return None

    if len(sanitized) == 6:
        return (
            ((rgb & 0xFF0000) >> 16) / 255.0,
            ((rgb & 0x00FF00) >> 8) / 255.0,
            (rgb & 0x0000FF) / 255.0,
        )
    if len(sanitized) == 3:
        return (
            ((rgb & 0xF00) >> 8) / 15.0,
            ((rgb & 0x0F0) >> 4) / 15.0,
            (rgb & 0x00F) / 15.0,
        )
    return None


@dataclass(frozen=True)
class Leg:
    """One contiguous segment of an itinerary travelled with a single mode."""

    mode: str  # uppercase, e.g. "WALK", "BUS", "TRAM"
    start_time: datetime
    end_time: datetime
    from_place: Place
    to_place: Place
    distance_meters: float
    duration_seconds: int
    geometry: str  # encoded polyline, may be empty
    route: str | None = None
    transit_leg: bool | None = None
    route_type: RouteType | None = None
    agency_name: str | None = None
    route_color: str | None = None
    route_text_color: str | None = None
    headsign: str | None = None
    real_time: bool | None = None
    pathway: bool | None = None
    street_names: tuple[str, ...] | None = None
    steps: tuple[Step, ...] | None = None
    intermediate_stops: tuple[Place, ...] | None = None
    # Polylines of later legs folded into this one by a merge. `geometry` only
    # ever holds the first leg's polyline.
    merged_geometry: tuple[str, ...] = ()

    @property
    def walk_mode(self) -> bool:
        return self.mode.lower() == "walk"

    @property
    def route_rgb(self) -> tuple[float, float, float] | None:
        return parse_hex_color(self.route_color)

    @property
    def route_text_rgb(self) -> tuple[float, float, float] | None:
        return parse_hex_color(self.route_text_color)

    def decode_polyline(self, include_merged: bool = False) -> list[Coordinate]:
        """Decode this leg's geometry.

        With include_merged, polylines absorbed from merged legs are appended
        in travel order.
        """
        coordinates = decode_polyline(self.geometry)
        if include_merged:
            for encoded in self.merged_geometry:
                coordinates.extend(decode_polyline(encoded))
        return coordinates
