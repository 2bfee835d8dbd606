"""Camera region domain model."""

from dataclasses import dataclass

from otp_itineraries.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class CameraRegion:
    """Map camera target: a centre coordinate plus the visible span in degrees."""

    center: Coordinate
    latitude_delta: float
    longitude_delta: float
