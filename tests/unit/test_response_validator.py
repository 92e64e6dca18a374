import json

import pytest

from portus_agent.agent.language import Language
from portus_agent.agent.schema import (
    ActionStep,
    AnalysisResult,
    FinalStep,
    ObservationStep,
    Recommendation,
    ThinkingStep,
)
from portus_agent.agent.validator import FailureReason, ResponseValidator


def _sample_result() -> AnalysisResult:
    return AnalysisResult(
        plan=["Check V102 schedule", "Assess Suez sandstorm impact"],
        recommendations=[
            Recommendation(
                action="Reroute V102 via Cape of Good Hope",
                impact_estimate="+9 transit days, avoids 48h delay",
                confidence=1.2,
            )
        ],
        sources=["vessels:V102", "weather:Sandstorm"],
        explain="V102 is delayed 48 hours by the Suez sandstorm.",
        trace=[
            ThinkingStep(message="Looking up affected vessels"),
            ActionStep(action_name="check_vessel_status", arguments={"vessel_id": "V102"}),
            ObservationStep(observation="V102 delayed 48h"),
            FinalStep(message="Recommend rerouting"),
        ],
    )


def _assert_error_fallback(result: AnalysisResult) -> None:
    assert result.plan == []
    assert result.sources == []
    assert len(result.recommendations) == 1
    assert result.recommendations[0].action == "API Error"
    assert result.recommendations[0].confidence == 0.0
    assert result.explain


def test_well_formed_reply_round_trips_unchanged() -> None:
    expected = _sample_result()
    raw = json.dumps(expected.to_payload())

    result = ResponseValidator().validate(raw)

    assert result == expected
    # Confidence is clamped only for display.
    assert result.recommendations[0].confidence == 1.2
    assert result.for_display().recommendations[0].confidence == 1.0


def test_reply_without_trace_is_accepted() -> None:
    raw = json.dumps(
        {"plan": [], "recommendations": [], "sources": [], "explain": "Nothing to report."}
    )

    result = ResponseValidator().validate(raw)

    assert result.trace is None
    assert result.explain == "Nothing to report."


def test_code_fenced_reply_is_accepted() -> None:
    payload = json.dumps(_sample_result().to_payload())

    result = ResponseValidator().validate(f"```json\n{payload}\n```")

    assert result == _sample_result()


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "   ",
        "not json at all",
        "[1, 2, 3]",
        '{"plan": [], "recommendations": [], "sources": []}',
        '{"plan": "one step", "recommendations": [], "sources": [], "explain": "x"}',
        '{"plan": [], "recommendations": [{"action": "a", "impact_estimate": "b", "confidence": "high"}], "sources": [], "explain": "x"}',
        '{"plan": [], "recommendations": [{"action": "a", "impact_estimate": "b", "confidence": true}], "sources": [], "explain": "x"}',
        '{"plan": [], "recommendations": [], "sources": [], "explain": "x", "trace": [{"type": "unknown"}]}',
    ],
)
def test_unusable_replies_fall_back(raw) -> None:
    _assert_error_fallback(ResponseValidator().validate(raw))


def test_non_string_input_falls_back() -> None:
    _assert_error_fallback(ResponseValidator().validate(42))  # type: ignore[arg-type]


def test_transport_failure_overrides_payload() -> None:
    raw = json.dumps(_sample_result().to_payload())

    result = ResponseValidator().validate(raw, failure=FailureReason.ERROR)

    _assert_error_fallback(result)


def test_timeout_fallback_is_distinguishable() -> None:
    validator = ResponseValidator()

    timeout = validator.validate(None, failure=FailureReason.TIMEOUT)
    error = validator.validate(None, failure=FailureReason.ERROR)

    _assert_error_fallback(timeout)
    assert "timed out" in timeout.explain
    assert timeout.explain != error.explain


def test_mock_answer_uses_vessel_from_query_and_language() -> None:
    result = ResponseValidator().mock("¿Hola, dónde está V205?", Language.SPANISH)

    assert result.sources == ["vessels:V205", "weather:Current", "ports:Singapore"]
    assert "V205" in result.explain
    assert result.explain.startswith("Basándome")


def test_mock_answer_detects_language_when_not_given() -> None:
    result = ResponseValidator().mock("船舶 V102 的状态如何？")

    assert result.sources[0] == "vessels:V102"
    assert "港口" in result.explain
