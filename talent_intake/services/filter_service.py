"""Filter candidates by status, score and search term. No UI logic; used by app layer."""

from typing import List, Optional

from ..schemas.candidate import StoredCandidate

ALL_STATUSES = "all"


def filter_by_status(
    candidates: List[StoredCandidate],
    status: Optional[str],
) -> List[StoredCandidate]:
    """
    Filter candidates by pipeline status. Does not mutate the input list.
    If status is None or "all", return all candidates.
    """
    if not status or status == ALL_STATUSES:
        return list(candidates)
    return [c for c in candidates if c.status == status]


def filter_by_min_score(
    candidates: List[StoredCandidate],
    min_score: Optional[int],
) -> List[StoredCandidate]:
    """Keep candidates scoring at least min_score. None returns all."""
    if min_score is None:
        return list(candidates)
    return [c for c in candidates if c.overall_score >= min_score]


def search_candidates(
    candidates: List[StoredCandidate],
    term: Optional[str],
) -> List[StoredCandidate]:
    """Case-insensitive substring match on name, email or position. Blank term returns all."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(candidates)
    return [
        c for c in candidates
        if needle in c.name.lower() or needle in c.email.lower() or needle in c.position.lower()
    ]
