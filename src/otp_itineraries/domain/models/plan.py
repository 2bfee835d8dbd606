"""Plan domain model."""

from dataclasses import dataclass
from datetime import datetime

from otp_itineraries.domain.models.itinerary import Itinerary
from otp_itineraries.domain.models.place import Place


@dataclass(frozen=True)
class Plan:
    """A trip plan with all itineraries the planner returned for one request."""

    date: datetime
    from_place: Place
    to_place: Place
    itineraries: tuple[Itinerary, ...]
