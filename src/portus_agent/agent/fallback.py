"""Deterministic mock answers when no chat-completion backend is configured."""

from __future__ import annotations

import re

from portus_agent.agent.language import Language
from portus_agent.agent.schema import (
    ActionStep,
    AnalysisResult,
    FinalStep,
    ObservationStep,
    Recommendation,
    ThinkingStep,
)
from portus_agent.agent.templates import MOCK_TEMPLATES, MockTemplate

_VESSEL_PATTERN = re.compile(r"V\d+")

DEFAULT_VESSEL_ID = "V101"


class MockAnalysisGenerator:
    """Builds a data-shaped answer without any remote call.

    The answer keeps the same contract as a real model reply, so downstream
    consumers (entity extraction, shared state, the API) behave identically in
    offline environments. Only the vessel id is taken from the query; every
    other figure comes from the localized template.
    """

    def __init__(self, templates: dict[Language, MockTemplate] | None = None) -> None:
        self.templates = templates or MOCK_TEMPLATES

    def generate(self, query: str, language: Language = Language.ENGLISH) -> AnalysisResult:
        vessel_id = extract_vessel_id(query) or DEFAULT_VESSEL_ID
        template = self.templates.get(language) or self.templates[Language.ENGLISH]
        return _render(template, vessel_id)


def extract_vessel_id(text: str) -> str | None:
    match = _VESSEL_PATTERN.search(text)
    return match.group(0) if match else None


def _render(template: MockTemplate, vessel_id: str) -> AnalysisResult:
    def fill(text: str) -> str:
        return text.format(vessel_id=vessel_id)

    return AnalysisResult(
        plan=[fill(step) for step in template.plan],
        recommendations=[
            Recommendation(action=fill(action), impact_estimate=fill(impact), confidence=confidence)
            for action, impact, confidence in template.recommendations
        ],
        sources=[f"vessels:{vessel_id}", "weather:Current", "ports:Singapore"],
        explain=fill(template.explain),
        trace=[
            ThinkingStep(message=fill(template.thinking)),
            ActionStep(action_name="check_vessel_status", arguments={"vessel_id": vessel_id}),
            ObservationStep(observation=fill(template.vessel_observation)),
            ActionStep(action_name="check_berth_availability", arguments={}),
            ObservationStep(observation=fill(template.berth_observation)),
            FinalStep(message=fill(template.final)),
        ],
    )
