"""Adapter for OpenTripPlanner REST JSON payloads."""

from otp_itineraries.adapters.otp_json.errors import PlanParseError, PlanRequestError
from otp_itineraries.adapters.otp_json.plan_file_source import PlanFileSource
from otp_itineraries.adapters.otp_json.plan_parser import PlanParser

__all__ = ["PlanFileSource", "PlanParseError", "PlanParser", "PlanRequestError"]
