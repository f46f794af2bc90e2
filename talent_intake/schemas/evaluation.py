"""Structured reply of the candidate evaluation service."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CandidateEvaluation(BaseModel):
    """LLM evaluation of one candidate. overallScore is required; out-of-range values are clamped."""

    model_config = ConfigDict(populate_by_name=True)

    overall_score: int = Field(..., alias="overallScore", description="0-100 suitability score")
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    recommendation: Optional[str] = Field(default=None, description="hire, reject or interview")
    reasoning: Optional[str] = None

    @field_validator("overall_score", mode="before")
    @classmethod
    def _clamp_score(cls, value):
        if isinstance(value, bool) or value is None:
            raise ValueError("overallScore must be a number")
        try:
            score = int(round(float(value)))
        except (TypeError, ValueError, OverflowError):
            raise ValueError(f"overallScore must be a number, got {value!r}")
        return max(0, min(100, score))
