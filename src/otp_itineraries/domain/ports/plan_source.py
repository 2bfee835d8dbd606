"""Plan source port."""

from typing import Protocol

from otp_itineraries.domain.models.plan import Plan


class PlanSource(Protocol):
    """Port for obtaining a trip plan."""

    def load_plan(self) -> Plan:
        """Load the plan to display."""
        ...
