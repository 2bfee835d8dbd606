"""Bounding rectangle domain model."""

from dataclasses import dataclass

from otp_itineraries.domain.models.coordinate import MapPoint


@dataclass(frozen=True)
class BoundingRect:
    """Axis-aligned rectangle in projected map units.

    The origin is the minimum corner; width and height are never negative.
    """

    origin_x: float
    origin_y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.origin_x + self.width

    @property
    def max_y(self) -> float:
        return self.origin_y + self.height

    @property
    def center(self) -> MapPoint:
        return MapPoint(self.origin_x + self.width / 2, self.origin_y + self.height / 2)

    def contains(self, point: MapPoint, tolerance: float = 0.0) -> bool:
        """Check whether a point lies inside the rectangle, edges included."""
        return (
            self.origin_x - tolerance <= point.x <= self.max_x + tolerance
            and self.origin_y - tolerance <= point.y <= self.max_y + tolerance
        )
