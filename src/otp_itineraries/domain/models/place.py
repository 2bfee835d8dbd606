"""Place domain model."""

from dataclasses import dataclass

from otp_itineraries.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class Place:
    """A named location an itinerary leg starts or ends at."""

    name: str
    latitude: float
    longitude: float
    vertex_type: str  # NORMAL, STOP, STATION, ...
    stop_id: str | None = None
    stop_code: str | None = None

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)
