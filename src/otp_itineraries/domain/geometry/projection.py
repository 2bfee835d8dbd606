"""Spherical Web-Mercator projection onto a fixed square world plane.

The world spans WORLD_SIZE units on each axis with (0, 0) at the north-west
corner: x grows eastwards with longitude, y grows southwards as latitude
falls. Longitudes are not wrapped, so paths across the antimeridian are not
supported.
"""

import math

from otp_itineraries.domain.models.coordinate import Coordinate, MapPoint

# 256-unit tiles at zoom level 20.
WORLD_SIZE = 256.0 * 2**20

# Latitude at which the projected world becomes square.
MAX_LATITUDE = 85.0511287798066


def project(coordinate: Coordinate) -> MapPoint:
    """Map a coordinate onto the world plane."""
    latitude = max(-MAX_LATITUDE, min(MAX_LATITUDE, coordinate.latitude))
    x = (coordinate.longitude + 180.0) / 360.0 * WORLD_SIZE

    sin_lat = math.sin(math.radians(latitude))
    y = (0.5 - math.log((1 + sin_lat) / (1 - sin_lat)) / (4 * math.pi)) * WORLD_SIZE
    return MapPoint(x, y)


def unproject(point: MapPoint) -> Coordinate:
    """Map a world-plane point back to a coordinate."""
    longitude = point.x / WORLD_SIZE * 360.0 - 180.0
    latitude = math.degrees(math.atan(math.sinh(math.pi * (1 - 2 * point.y / WORLD_SIZE))))
    return Coordinate(latitude, longitude)
