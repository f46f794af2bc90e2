"""Aggregates over stored candidates for the analytics view."""

from collections import Counter
from typing import List, Tuple

from ..config import CANDIDATE_STATUSES
from ..schemas.candidate import StoredCandidate

# (label, min years, max years), inclusive
EXPERIENCE_RANGES: List[Tuple[str, int, int]] = [
    ("0-2 years", 0, 2),
    ("3-5 years", 3, 5),
    ("6-10 years", 6, 10),
    ("10+ years", 11, 100),
]


def skill_frequency(candidates: List[StoredCandidate], top_n: int = 8) -> List[Tuple[str, int]]:
    """Top N skills by number of candidates listing them."""
    counts = Counter(skill for c in candidates for skill in c.skills)
    return counts.most_common(top_n)


def experience_distribution(candidates: List[StoredCandidate]) -> List[Tuple[str, int]]:
    return [
        (label, sum(1 for c in candidates if low <= c.experience <= high))
        for label, low, high in EXPERIENCE_RANGES
    ]


def status_distribution(candidates: List[StoredCandidate]) -> List[Tuple[str, int]]:
    """Candidates per status in pipeline order; statuses with no candidates are dropped."""
    counts = Counter(c.status for c in candidates)
    return [(status, counts[status]) for status in CANDIDATE_STATUSES if counts[status] > 0]


def top_candidates(candidates: List[StoredCandidate], n: int = 3) -> List[StoredCandidate]:
    # sorted() is stable: ties keep upload order
    return sorted(candidates, key=lambda c: c.overall_score, reverse=True)[:n]


def score_source_counts(candidates: List[StoredCandidate]) -> Tuple[int, int]:
    """(ai_scored, fallback_scored)."""
    ai = sum(1 for c in candidates if c.score_source == "ai")
    return ai, len(candidates) - ai
