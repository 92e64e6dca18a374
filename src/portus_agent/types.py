"""Shared domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True, slots=True)
class Document:
    """A knowledge-base passage available for retrieval."""

    id: str
    title: str
    text: str


@dataclass(frozen=True, slots=True)
class RankedDocument:
    """A document paired with its lexical match score."""

    document: Document
    score: int


@dataclass(frozen=True, slots=True)
class Vessel:
    vessel_id: str
    route: str
    eta: str
    delay_hours: int
    status: Literal["On Time", "Delayed", "At Risk"]
    origin: str
    destination: str


@dataclass(frozen=True, slots=True)
class Port:
    port_id: str
    name: str
    throughput_pct: int
    resilience_score: float
    congestion_flag: Literal[0, 1]


@dataclass(frozen=True, slots=True)
class WeatherEvent:
    region: str
    event: str
    risk_level: Literal["Low", "Medium", "High"]
    start_date: str
    end_date: str
    impact: str


@dataclass(frozen=True, slots=True)
class Route:
    route_id: str
    name: str
    transit_days: int
    cost_index: float


@dataclass(frozen=True, slots=True)
class DatasetSnapshot:
    """Read-only operational records shared with the generator."""

    vessels: tuple[Vessel, ...] = ()
    ports: tuple[Port, ...] = ()
    weather: tuple[WeatherEvent, ...] = ()
    routes: tuple[Route, ...] = ()


@dataclass(frozen=True, slots=True)
class PromptPackage:
    """A fully assembled request for the chat-completion backend."""

    system_instruction: str
    user_content: str


@dataclass(frozen=True, slots=True)
class Coordinates:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class MapFocus:
    """What the map view should center on."""

    entity_id: str | None = None
    coordinates: Coordinates | None = None
    zoom: float | None = None


@dataclass(frozen=True, slots=True)
class EntityExtraction:
    """Entities recognized in an answer's narrative text."""

    vessel_id: str | None = None
    event_keyword: str | None = None
    focus: MapFocus | None = None

    @property
    def empty(self) -> bool:
        return self.vessel_id is None and self.event_keyword is None and self.focus is None


@dataclass(slots=True)
class ToolTrace:
    """Trace record for the remote generator call."""

    name: str
    input_payload: dict[str, object] = field(default_factory=dict)
    output_preview: str = ""
    latency_ms: float = 0.0
