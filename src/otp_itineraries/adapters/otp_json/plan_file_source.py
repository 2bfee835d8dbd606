"""Plan source reading a saved plan response from disk."""

import json
import logging
from pathlib import Path

from otp_itineraries.adapters.otp_json.plan_parser import PlanParser
from otp_itineraries.domain.models.plan import Plan

logger = logging.getLogger(__name__)


class PlanFileSource:
    """Loads a plan from a JSON file holding a trip planner response."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def load_plan(self) -> Plan:
        logger.info(f"Loading plan from {self._path}")
        with open(self._path, encoding="utf-8") as f:
            data = json.load(f)
        return PlanParser.parse_response(data)
