"""Entity recognition over an answer's narrative text."""

from __future__ import annotations

import re
from collections.abc import Mapping

from portus_agent.agent.schema import AnalysisResult
from portus_agent.logger import LOGGER
from portus_agent.types import Coordinates, EntityExtraction, MapFocus

_VESSEL_PATTERN = re.compile(r"V\d+")
# Checked in priority order; the first keyword present anywhere in the text wins.
_EVENT_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(keyword, flags=re.IGNORECASE) for keyword in ("Suez", "storm", "delay", "disruption")
)

FOCUS_ZOOM = 1.5

VESSEL_POSITIONS: dict[str, Coordinates] = {
    "V101": Coordinates(x=200, y=150),
    "V102": Coordinates(x=400, y=200),
    "V103": Coordinates(x=300, y=100),
    "V104": Coordinates(x=500, y=250),
}


class EntityExtractor:
    """Finds the first vessel id and disruption keyword in ``explain``.

    A vessel id without a known position still counts as a selection; only
    the map focus is left out.
    """

    def __init__(self, positions: Mapping[str, Coordinates] | None = None) -> None:
        self.positions = VESSEL_POSITIONS if positions is None else positions

    def extract(self, result: AnalysisResult) -> EntityExtraction:
        try:
            text = result.explain
            vessel_match = _VESSEL_PATTERN.search(text)
            event_keyword = next(
                (
                    pattern.pattern.lower()
                    for pattern in _EVENT_PATTERNS
                    if pattern.search(text)
                ),
                None,
            )
        except (AttributeError, TypeError) as exc:
            LOGGER.warning("Entity extraction skipped: %s", exc)
            return EntityExtraction()

        vessel_id = vessel_match.group(0) if vessel_match else None

        focus: MapFocus | None = None
        if vessel_id is not None:
            coordinates = self.positions.get(vessel_id)
            if coordinates is not None:
                focus = MapFocus(entity_id=vessel_id, coordinates=coordinates, zoom=FOCUS_ZOOM)

        return EntityExtraction(vessel_id=vessel_id, event_keyword=event_keyword, focus=focus)
