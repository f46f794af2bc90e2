"""Service exports."""

from .analytics_service import (
    experience_distribution,
    score_source_counts,
    skill_frequency,
    status_distribution,
    top_candidates,
)
from .filter_service import filter_by_min_score, filter_by_status, search_candidates
from .upload_service import UploadOrchestrator

__all__ = [
    "UploadOrchestrator",
    "filter_by_status",
    "filter_by_min_score",
    "search_candidates",
    "skill_frequency",
    "experience_distribution",
    "status_distribution",
    "top_candidates",
    "score_source_counts",
]
