"""Display formatters."""

from otp_itineraries.adapters.formatters.leg_formatter import LegFormatter

__all__ = ["LegFormatter"]
