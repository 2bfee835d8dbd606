"""Relevant legs: the leg list shown to riders, one row per leg."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from otp_itineraries.domain.legs.leg_merger import merge_adjacent_legs

if TYPE_CHECKING:
    from otp_itineraries.domain.models.leg import Leg

logger = logging.getLogger(__name__)

DEFAULT_MIN_WALK_DURATION_SECONDS = 60


def is_negligible_walk(leg: "Leg", min_walk_duration_seconds: int) -> bool:
    return leg.mode == "WALK" and leg.duration_seconds < min_walk_duration_seconds


def filter_negligible_walks(
    legs: Iterable["Leg"],
    min_walk_duration_seconds: int = DEFAULT_MIN_WALK_DURATION_SECONDS,
) -> list["Leg"]:
    """Drop WALK legs shorter than the threshold; a walk of exactly the threshold stays."""
    return [leg for leg in legs if not is_negligible_walk(leg, min_walk_duration_seconds)]


def relevant_legs(
    legs: Iterable["Leg"],
    min_walk_duration_seconds: int = DEFAULT_MIN_WALK_DURATION_SECONDS,
) -> list["Leg"]:
    """Filter out negligible walks, then merge adjacent legs of the same ride."""
    legs = list(legs)
    filtered = filter_negligible_walks(legs, min_walk_duration_seconds)
    result = merge_adjacent_legs(filtered)
    if len(result) != len(legs):
        logger.debug(
            f"Reduced {len(legs)} legs to {len(result)} relevant legs "
            f"({len(legs) - len(filtered)} short walks dropped)"
        )
    return result
