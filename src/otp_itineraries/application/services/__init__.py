"""Application services."""

from otp_itineraries.application.services.itinerary_display_service import (
    ItineraryDisplay,
    ItineraryDisplayService,
)

__all__ = ["ItineraryDisplay", "ItineraryDisplayService"]
