"""Pydantic models for the structured answer contract."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictStr


class Recommendation(BaseModel):
    action: StrictStr
    impact_estimate: StrictStr
    # Not clamped on input; see AnalysisResult.for_display.
    confidence: StrictFloat


class ThinkingStep(BaseModel):
    type: Literal["thinking"] = "thinking"
    message: StrictStr


class ActionStep(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["action"] = "action"
    action_name: StrictStr = Field(alias="actionName")
    arguments: dict[str, Any] = Field(default_factory=dict)
    requires_approval: StrictBool | None = None


class ObservationStep(BaseModel):
    type: Literal["observation"] = "observation"
    observation: StrictStr


class FinalStep(BaseModel):
    type: Literal["final"] = "final"
    message: StrictStr


TraceStep = Annotated[
    Union[ThinkingStep, ActionStep, ObservationStep, FinalStep],
    Field(discriminator="type"),
]


class AnalysisResult(BaseModel):
    """Answer returned to the caller for every query.

    ``plan`` and ``recommendations`` may be empty but are always present.
    ``trace`` is optional; when given, consumers treat its last step as the
    conclusion.
    """

    plan: list[StrictStr]
    recommendations: list[Recommendation]
    sources: list[StrictStr]
    explain: StrictStr
    trace: list[TraceStep] | None = None

    def for_display(self) -> "AnalysisResult":
        """Return a copy with every confidence clamped to ``[0, 1]``."""
        clamped = [
            rec.model_copy(update={"confidence": min(1.0, max(0.0, rec.confidence))})
            for rec in self.recommendations
        ]
        return self.model_copy(update={"recommendations": clamped})

    def to_payload(self) -> dict[str, Any]:
        """Serialize with wire field names (``actionName``) and no null fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
