"""Coordinate and projected point domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A geographic position in degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class MapPoint:
    """A point on the projected map plane."""

    x: float
    y: float
