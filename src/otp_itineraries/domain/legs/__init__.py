"""Leg sequence operations: merging same-ride legs and filtering short walks."""

from otp_itineraries.domain.legs.leg_merger import (
    merge_adjacent_legs,
    merge_legs,
    should_merge_legs,
)
from otp_itineraries.domain.legs.itinerary_normalizer import (
    DEFAULT_MIN_WALK_DURATION_SECONDS,
    filter_negligible_walks,
    relevant_legs,
)

__all__ = [
    "DEFAULT_MIN_WALK_DURATION_SECONDS",
    "filter_negligible_walks",
    "merge_adjacent_legs",
    "merge_legs",
    "relevant_legs",
    "should_merge_legs",
]
