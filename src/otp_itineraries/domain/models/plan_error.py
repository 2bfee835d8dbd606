"""Plan error details domain model."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator


class PlanErrorCode(StrEnum):
    """Message keys reported by the trip planner when no plan could be produced."""

    SYSTEM_ERROR = "SYSTEM_ERROR"
    GRAPH_UNAVAILABLE = "GRAPH_UNAVAILABLE"
    OUTSIDE_BOUNDS = "OUTSIDE_BOUNDS"
    PATH_NOT_FOUND = "PATH_NOT_FOUND"
    NO_TRANSIT_TIMES = "NO_TRANSIT_TIMES"
    REQUEST_TIMEOUT = "REQUEST_TIMEOUT"
    BOGUS_PARAMETER = "BOGUS_PARAMETER"
    GEOCODE_FROM_NOT_FOUND = "GEOCODE_FROM_NOT_FOUND"
    GEOCODE_TO_NOT_FOUND = "GEOCODE_TO_NOT_FOUND"
    GEOCODE_FROM_TO_NOT_FOUND = "GEOCODE_FROM_TO_NOT_FOUND"
    TOO_CLOSE = "TOO_CLOSE"
    LOCATION_NOT_ACCESSIBLE = "LOCATION_NOT_ACCESSIBLE"
    GEOCODE_FROM_AMBIGUOUS = "GEOCODE_FROM_AMBIGUOUS"
    GEOCODE_TO_AMBIGUOUS = "GEOCODE_TO_AMBIGUOUS"
    GEOCODE_FROM_TO_AMBIGUOUS = "GEOCODE_FROM_TO_AMBIGUOUS"
    UNDERSPECIFIED_TRIANGLE = "UNDERSPECIFIED_TRIANGLE"
    TRIANGLE_NOT_AFFINE = "TRIANGLE_NOT_AFFINE"
    TRIANGLE_OPTIMIZE_TYPE_NOT_SET = "TRIANGLE_OPTIMIZE_TYPE_NOT_SET"
    TRIANGLE_VALUES_NOT_SET = "TRIANGLE_VALUES_NOT_SET"
    UNKNOWN = "UNKNOWN"


class PlanError(BaseModel):
    """Error reported by the trip planner instead of a plan."""

    model_config = ConfigDict(frozen=True)

    id: int
    message: str
    code: PlanErrorCode = PlanErrorCode.UNKNOWN

    @field_validator("code", mode="before")
    @classmethod
    def fallback_to_unknown(cls, v: object) -> object:
        """Map message keys this client does not know yet to UNKNOWN."""
        if isinstance(v, str) and v not in PlanErrorCode.__members__:
            return PlanErrorCode.UNKNOWN
        return v
