"""Candidate scoring: LLM evaluation providers and the fallback estimate."""

from .evaluation_service import (
    EvaluationService,
    GeminiEvaluationService,
    OpenAIEvaluationService,
    get_evaluation_service,
)
from .fallback_scorer import estimate_fallback_score

__all__ = [
    "EvaluationService",
    "OpenAIEvaluationService",
    "GeminiEvaluationService",
    "get_evaluation_service",
    "estimate_fallback_score",
]
