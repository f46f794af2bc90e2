"""
Fallback candidate scoring.

Used when the evaluation service is not configured or fails for a record.
This is a degraded-mode estimate from experience, skill count and
seniority, not a quality assessment: records scored here carry
score_source="fallback" so callers can tell them apart.
"""

import random
from typing import Optional

MIN_FALLBACK_SCORE = 20
MAX_FALLBACK_SCORE = 95
BASE_SCORE = 30
RANDOM_SPREAD = 10


def estimate_fallback_score(
    experience: int,
    skill_count: int,
    position: str = "",
    rng: Optional[random.Random] = None,
) -> int:
    """
    30 + min(experience*8, 40) + min(skills*4, 30) + 10 if "senior" in position,
    plus a random integer in [-10, 10], clamped to [20, 95].
    A fresh Random is used when rng is None, so scores are not reproducible across calls.
    """
    rng = rng or random.Random()
    experience_score = min(max(experience, 0) * 8, 40)
    skills_score = min(max(skill_count, 0) * 4, 30)
    position_bonus = 10 if "senior" in (position or "").lower() else 0
    random_factor = rng.randint(-RANDOM_SPREAD, RANDOM_SPREAD)
    raw = BASE_SCORE + experience_score + skills_score + position_bonus + random_factor
    return max(MIN_FALLBACK_SCORE, min(MAX_FALLBACK_SCORE, raw))
