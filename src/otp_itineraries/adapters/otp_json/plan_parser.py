"""Parser for OpenTripPlanner REST plan responses."""

import logging
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from otp_itineraries.adapters.otp_json.errors import PlanParseError, PlanRequestError
from otp_itineraries.domain.models import (
    Itinerary,
    Leg,
    Place,
    Plan,
    PlanError,
    RouteType,
    Step,
)

logger = logging.getLogger(__name__)


def _require(data: dict[str, Any], key: str, context: str) -> Any:
    if key not in data or data[key] is None:
        raise PlanParseError(f"{context} is missing required field '{key}'")
    return data[key]


def _as_dict(value: Any, context: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise PlanParseError(f"{context} must be an object, got {type(value).__name__}")
    return value


def _as_list(value: Any, context: str) -> list[Any]:
    if not isinstance(value, list):
        raise PlanParseError(f"{context} must be a list, got {type(value).__name__}")
    return value


def _as_float(value: Any, context: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PlanParseError(f"{context} must be a number, got {value!r}")
    return float(value)


class PlanParser:
    """Parses OTP plan responses (timestamps in epoch milliseconds) into a Plan."""

    @staticmethod
    def parse_response(response: dict[str, Any]) -> Plan:
        """Parse a full plan response.

        Raises:
            PlanRequestError: The response carries an error object.
            PlanParseError: The response has no plan or the plan is malformed.
        """
        response = _as_dict(response, "response")
        if response.get("error"):
            raise PlanRequestError(PlanParser.parse_error(response["error"]))
        return PlanParser.parse_plan(_require(response, "plan", "response"))

    @staticmethod
    def parse_error(data: dict[str, Any]) -> PlanError:
        data = _as_dict(data, "error")
        try:
            return PlanError(
                id=data.get("id", 0),
                message=data.get("msg", ""),
                code=data.get("message", "UNKNOWN"),
            )
        except ValidationError as e:
            raise PlanParseError(f"error object is malformed: {e}") from e

    @staticmethod
    def parse_plan(data: dict[str, Any]) -> Plan:
        data = _as_dict(data, "plan")
        itineraries = tuple(
            PlanParser.parse_itinerary(item, f"itinerary {i}")
            for i, item in enumerate(_as_list(data.get("itineraries", []), "plan.itineraries"))
        )
        logger.debug(f"Parsed plan with {len(itineraries)} itineraries")
        return Plan(
            date=PlanParser._parse_time(_require(data, "date", "plan"), "plan.date"),
            from_place=PlanParser.parse_place(_require(data, "from", "plan"), "plan.from"),
            to_place=PlanParser.parse_place(_require(data, "to", "plan"), "plan.to"),
            itineraries=itineraries,
        )

    @staticmethod
    def parse_itinerary(data: dict[str, Any], context: str = "itinerary") -> Itinerary:
        data = _as_dict(data, context)
        legs = tuple(
            PlanParser.parse_leg(item, f"{context} leg {i}")
            for i, item in enumerate(_as_list(_require(data, "legs", context), f"{context}.legs"))
        )
        return Itinerary(
            duration_seconds=round(_as_float(_require(data, "duration", context), context)),
            start_time=PlanParser._parse_time(_require(data, "startTime", context), context),
            end_time=PlanParser._parse_time(_require(data, "endTime", context), context),
            legs=legs,
            walk_time=round(_as_float(data.get("walkTime", 0), context)),
            transit_time=round(_as_float(data.get("transitTime", 0), context)),
            waiting_time=round(_as_float(data.get("waitingTime", 0), context)),
            walk_distance=_as_float(data.get("walkDistance", 0.0), context),
            walk_limit_exceeded=bool(data.get("walkLimitExceeded", False)),
            elevation_lost=_as_float(data.get("elevationLost", 0.0), context),
            elevation_gained=_as_float(data.get("elevationGained", 0.0), context),
            transfers=round(_as_float(data.get("transfers", 0), context)),
        )

    @staticmethod
    def parse_leg(data: dict[str, Any], context: str = "leg") -> Leg:
        data = _as_dict(data, context)
        distance = _as_float(_require(data, "distance", context), f"{context}.distance")
        duration = _as_float(_require(data, "duration", context), f"{context}.duration")
        if distance < 0 or duration < 0:
            raise PlanParseError(f"{context} has negative distance or duration")

        geometry = data.get("legGeometry") or {}
        street_names = data.get("streetNames")
        steps = data.get("steps")
        intermediate_stops = data.get("intermediateStops")
        return Leg(
            mode=str(_require(data, "mode", context)).upper(),
            start_time=PlanParser._parse_time(_require(data, "startTime", context), context),
            end_time=PlanParser._parse_time(_require(data, "endTime", context), context),
            from_place=PlanParser.parse_place(_require(data, "from", context), f"{context}.from"),
            to_place=PlanParser.parse_place(_require(data, "to", context), f"{context}.to"),
            distance_meters=distance,
            duration_seconds=round(duration),
            geometry=str(_as_dict(geometry, f"{context}.legGeometry").get("points") or ""),
            route=PlanParser._optional_str(data.get("route")),
            transit_leg=data.get("transitLeg"),
            route_type=PlanParser._parse_route_type(data.get("routeType")),
            agency_name=PlanParser._optional_str(data.get("agencyName")),
            route_color=PlanParser._optional_str(data.get("routeColor")),
            route_text_color=PlanParser._optional_str(data.get("routeTextColor")),
            headsign=PlanParser._optional_str(data.get("headsign")),
            real_time=data.get("realTime"),
            pathway=data.get("pathway"),
            street_names=(
                tuple(str(name) for name in _as_list(street_names, context))
                if street_names is not None
                else None
            ),
            steps=(
                tuple(
                    PlanParser.parse_step(s, f"{context} step") for s in _as_list(steps, context)
                )
                if steps is not None
                else None
            ),
            intermediate_stops=(
                tuple(
                    PlanParser.parse_place(p, f"{context} stop")
                    for p in _as_list(intermediate_stops, context)
                )
                if intermediate_stops is not None
                else None
            ),
        )

    @staticmethod
    def parse_place(data: dict[str, Any], context: str = "place") -> Place:
        data = _as_dict(data, context)
        return Place(
            name=str(data.get("name") or ""),
            latitude=_as_float(_require(data, "lat", context), f"{context}.lat"),
            longitude=_as_float(_require(data, "lon", context), f"{context}.lon"),
            vertex_type=str(data.get("vertexType") or "NORMAL"),
            stop_id=PlanParser._optional_str(data.get("stopId")),
            stop_code=PlanParser._optional_str(data.get("stopCode")),
        )

    @staticmethod
    def parse_step(data: dict[str, Any], context: str = "step") -> Step:
        data = _as_dict(data, context)
        elevation_change = data.get("elevationChange")
        return Step(
            distance=_as_float(data.get("distance", 0.0), f"{context}.distance"),
            street_name=str(data.get("streetName") or ""),
            latitude=_as_float(_require(data, "lat", context), f"{context}.lat"),
            longitude=_as_float(_require(data, "lon", context), f"{context}.lon"),
            relative_direction=PlanParser._optional_str(data.get("relativeDirection")),
            elevation_change=(
                _as_float(elevation_change, f"{context}.elevationChange")
                if elevation_change is not None
                else None
            ),
        )

    @staticmethod
    def _parse_time(value: Any, context: str) -> datetime:
        """Parse epoch milliseconds or an ISO-8601 string."""
        if isinstance(value, str):
            try:
                parsed = datetime.fromisoformat(value)
            except ValueError as e:
                raise PlanParseError(f"{context} has invalid timestamp {value!r}") from e
            return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
        return datetime.fromtimestamp(_as_float(value, context) / 1000, tz=UTC)

    @staticmethod
    def _parse_route_type(value: Any) -> RouteType | None:
        if value is None:
            return None
        try:
            return RouteType(int(value))
        except (TypeError, ValueError):
            logger.debug(f"Ignoring unknown route type {value!r}")
            return None

    @staticmethod
    def _optional_str(value: Any) -> str | None:
        return None if value is None else str(value)
