"""Static operational dataset served to the generator as grounding context."""

from __future__ import annotations

from portus_agent.types import DatasetSnapshot, Port, Route, Vessel, WeatherEvent

VESSELS: tuple[Vessel, ...] = (
    Vessel("V101", "R01", "2025-10-28", 24, "At Risk", "Shanghai", "Rotterdam"),
    Vessel("V102", "R01", "2025-10-29", 48, "Delayed", "Singapore", "Rotterdam"),
    Vessel("V201", "R02", "2025-11-05", 0, "On Time", "Los Angeles", "Tokyo"),
)

PORTS: tuple[Port, ...] = (
    Port("P01", "Rotterdam", 95, 0.88, 1),
    Port("P02", "Singapore", 98, 0.95, 1),
    Port("P03", "Shanghai", 85, 0.92, 0),
)

WEATHER: tuple[WeatherEvent, ...] = (
    WeatherEvent(
        "Suez Canal",
        "Sandstorm",
        "High",
        "2025-10-27",
        "2025-10-29",
        "Reduced visibility, 48-hour transit delay expected.",
    ),
    WeatherEvent(
        "South China Sea",
        "Typhoon",
        "High",
        "2025-11-01",
        "2025-11-04",
        "Vessel rerouting required, high seas.",
    ),
)

ROUTES: tuple[Route, ...] = (
    Route("R01", "Asia-Europe", 25, 1.2),
    Route("R02", "Trans-Pacific", 14, 1.0),
    Route("R03", "Cape of Good Hope", 34, 1.5),
)

DEFAULT_SNAPSHOT = DatasetSnapshot(
    vessels=VESSELS,
    ports=PORTS,
    weather=WEATHER,
    routes=ROUTES,
)
