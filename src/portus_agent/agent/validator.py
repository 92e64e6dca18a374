"""Parsing and validation of generator replies, with deterministic fallbacks."""

from __future__ import annotations

import re
from enum import Enum

from pydantic import ValidationError

from portus_agent.agent.fallback import MockAnalysisGenerator
from portus_agent.agent.language import Language, LanguageDetector
from portus_agent.agent.schema import AnalysisResult, Recommendation
from portus_agent.logger import LOGGER

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(?P<body>.*?)\s*```$", flags=re.DOTALL)


class FailureReason(str, Enum):
    ERROR = "error"
    TIMEOUT = "timeout"


_FAILURE_TEXT: dict[FailureReason, tuple[str, str]] = {
    FailureReason.ERROR: (
        "Could not retrieve analysis.",
        "There was an error processing your request with the AI service. "
        "Please try again later or check the service configuration.",
    ),
    FailureReason.TIMEOUT: (
        "The request timed out before an analysis was returned.",
        "The request to the AI service timed out. Please try again in a moment.",
    ),
}


class ResponseValidator:
    """Turns raw generator text into an ``AnalysisResult``.

    ``validate`` is total: absent text, invalid JSON, schema violations and
    caller-reported transport failures all produce a fallback answer instead of
    an exception. A reply that validates is returned exactly as parsed.
    """

    def __init__(
        self,
        *,
        detector: LanguageDetector | None = None,
        mock_generator: MockAnalysisGenerator | None = None,
    ) -> None:
        self.detector = detector or LanguageDetector()
        self.mock_generator = mock_generator or MockAnalysisGenerator()

    def validate(
        self,
        raw_text: str | None,
        *,
        failure: FailureReason | None = None,
    ) -> AnalysisResult:
        if failure is not None:
            return self.failure_fallback(failure)

        result = self.parse(raw_text)
        if result is None:
            return self.failure_fallback(FailureReason.ERROR)
        return result

    def parse(self, raw_text: str | None) -> AnalysisResult | None:
        """Return the parsed answer, or ``None`` if the text is unusable."""
        if not isinstance(raw_text, str) or not raw_text.strip():
            LOGGER.warning("Generator returned an empty reply")
            return None

        text = raw_text.strip()
        fenced = _CODE_FENCE.match(text)
        if fenced:
            text = fenced.group("body")

        try:
            return AnalysisResult.model_validate_json(text)
        except ValidationError as exc:
            LOGGER.warning(
                "Generator reply rejected (%d validation errors): %s",
                exc.error_count(),
                exc.errors(include_url=False)[:3],
            )
            return None

    def failure_fallback(self, reason: FailureReason) -> AnalysisResult:
        impact, explain = _FAILURE_TEXT[reason]
        return AnalysisResult(
            plan=[],
            recommendations=[
                Recommendation(action="API Error", impact_estimate=impact, confidence=0.0)
            ],
            sources=[],
            explain=explain,
        )

    def mock(self, query: str, language: Language | None = None) -> AnalysisResult:
        """Answer used when no generator is configured at all."""
        if language is None:
            language = self.detector.detect(query)
        return self.mock_generator.generate(query, language)
