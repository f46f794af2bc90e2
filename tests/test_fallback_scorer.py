import random

from talent_intake.scoring.fallback_scorer import estimate_fallback_score


class StubRandom:
    """Returns a fixed random factor."""

    def __init__(self, value: int) -> None:
        self.value = value

    def randint(self, a, b):
        assert (a, b) == (-10, 10)
        return self.value


def test_formula_without_random_component():
    # 30 + 2*8 + 3*4 + 10
    assert estimate_fallback_score(2, 3, "Senior Engineer", rng=StubRandom(0)) == 68


def test_experience_and_skills_are_capped():
    assert estimate_fallback_score(5, 7, "Engineer", rng=StubRandom(-10)) == 30 + 40 + 28 - 10
    assert estimate_fallback_score(50, 50, "Engineer", rng=StubRandom(0)) == 95


def test_senior_match_is_case_insensitive():
    assert estimate_fallback_score(0, 0, "SENIOR designer", rng=StubRandom(0)) == 40
    assert estimate_fallback_score(0, 0, "Designer", rng=StubRandom(0)) == 30


def test_clamped_at_both_ends():
    assert estimate_fallback_score(0, 0, "", rng=StubRandom(-10)) == 20
    assert estimate_fallback_score(10, 10, "senior", rng=StubRandom(10)) == 95


def test_bounds_hold_for_every_draw():
    rng = random.Random(1234)
    for experience in range(0, 12):
        for skills in range(0, 10):
            for position in ("", "Engineer", "Senior Engineer"):
                for _ in range(5):
                    score = estimate_fallback_score(experience, skills, position, rng=rng)
                    assert 20 <= score <= 95


def test_unseeded_calls_stay_in_bounds():
    scores = {estimate_fallback_score(3, 4, "Engineer") for _ in range(200)}
    # 30 + 24 + 16 = 70, +/- 10
    assert min(scores) >= 60 and max(scores) <= 80
