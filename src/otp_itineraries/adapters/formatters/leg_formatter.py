"""Formatter for leg and itinerary display strings."""

from datetime import datetime
from zoneinfo import ZoneInfo

from otp_itineraries.adapters.config.app_config import AppConfig
from otp_itineraries.domain.models.itinerary import Itinerary
from otp_itineraries.domain.models.leg import Leg

_FEET_PER_METER = 3.28084
_MILES_PER_METER = 0.000621371
# About a tenth of a mile; shorter distances are shown in feet.
_FEET_THRESHOLD = 528.0


class LegFormatter:
    """Formats durations, distances and times according to configuration."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with timezone and distance unit settings.
        """
        self.config = config

    def format_duration(self, seconds: int) -> str:
        """Format a duration as hours and minutes (e.g. '1h 5m', '43m', '0m')."""
        hours, minutes = divmod(max(seconds, 0) // 60, 60)
        if hours and minutes:
            return f"{hours}h {minutes}m"
        if hours:
            return f"{hours}h"
        return f"{minutes}m"

    def format_distance(self, meters: float) -> str:
        """Format a distance in the configured unit system."""
        if self.config.distance_units == "imperial":
            feet = meters * _FEET_PER_METER
            if feet < _FEET_THRESHOLD:
                return f"{feet:.0f} ft"
            return f"{meters * _MILES_PER_METER:.1f} mi"

        if meters < 1000:
            return f"{meters:.0f} m"
        return f"{meters / 1000:.1f} km"

    def format_time(self, moment: datetime) -> str:
        """Format a timestamp as 'h:mm AM' in the configured timezone."""
        local = moment.astimezone(ZoneInfo(self.config.timezone))
        hour = local.hour % 12 or 12
        suffix = "AM" if local.hour < 12 else "PM"
        return f"{hour}:{local.minute:02d} {suffix}"

    def summarize_itinerary(self, itinerary: Itinerary) -> str:
        """One-line summary, e.g. 'Departs at 9:05 AM; duration: 43m'."""
        return (
            f"Departs at {self.format_time(itinerary.start_time)}; "
            f"duration: {self.format_duration(itinerary.duration_seconds)}"
        )

    def describe_leg(self, leg: Leg) -> str:
        """One-line description of a leg for a directions list."""
        if leg.walk_mode:
            title = f"Walk to {leg.to_place.name}"
        else:
            title = " ".join(part for part in (leg.mode, leg.route) if part)
            if leg.headsign:
                title += f" towards {leg.headsign}"
            title += f": {leg.from_place.name} to {leg.to_place.name}"

        return (
            f"{title} ({self.format_duration(leg.duration_seconds)}, "
            f"{self.format_distance(leg.distance_meters)})"
        )
