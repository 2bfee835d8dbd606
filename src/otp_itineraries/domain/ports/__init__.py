"""Ports (interfaces) for the ports-and-adapters architecture."""

from otp_itineraries.domain.ports.plan_source import PlanSource

__all__ = ["PlanSource"]
