"""Errors raised while turning trip-planner payloads into domain objects."""

from otp_itineraries.domain.models.plan_error import PlanError


class PlanParseError(ValueError):
    """The payload is not a well-formed plan response."""


class PlanRequestError(Exception):
    """The trip planner answered with an error instead of a plan."""

    def __init__(self, error: PlanError) -> None:
        super().__init__(f"Trip planner error {error.id} ({error.code}): {error.message}")
        self.error = error
