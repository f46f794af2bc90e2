from talent_intake.schemas.candidate import StoredCandidate
from talent_intake.services.analytics_service import (
    experience_distribution,
    score_source_counts,
    skill_frequency,
    status_distribution,
    top_candidates,
)
from talent_intake.services.filter_service import (
    filter_by_min_score,
    filter_by_status,
    search_candidates,
)


def _candidates():
    return [
        StoredCandidate(name="Jane Doe", email="jane@x.com", position="Data Scientist",
                        skills=["Python", "SQL"], experience=1, overall_score=70, score_source="ai"),
        StoredCandidate(name="John Roe", email="john@y.org", position="Designer",
                        skills=["Figma"], experience=4, overall_score=85, status="shortlisted"),
        StoredCandidate(name="Ann Lee", email="ann@x.com", position="Analyst",
                        skills=["SQL", "Excel"], experience=12, overall_score=70, status="hired"),
    ]


def test_filter_by_status():
    candidates = _candidates()
    assert [c.name for c in filter_by_status(candidates, "shortlisted")] == ["John Roe"]
    assert filter_by_status(candidates, "all") == candidates
    assert filter_by_status(candidates, None) == candidates
    assert filter_by_status(candidates, "rejected") == []


def test_filter_does_not_mutate_input():
    candidates = _candidates()
    result = filter_by_status(candidates, "all")
    result.pop()
    assert len(candidates) == 3


def test_search_matches_name_email_or_position():
    candidates = _candidates()
    assert [c.name for c in search_candidates(candidates, "JANE")] == ["Jane Doe"]
    assert [c.name for c in search_candidates(candidates, "y.org")] == ["John Roe"]
    assert [c.name for c in search_candidates(candidates, "analyst")] == ["Ann Lee"]
    assert search_candidates(candidates, "  ") == candidates


def test_filter_by_min_score():
    assert [c.name for c in filter_by_min_score(_candidates(), 80)] == ["John Roe"]
    assert len(filter_by_min_score(_candidates(), None)) == 3


def test_search_status_and_min_score_compose():
    def shown(term, status, min_score):
        found = filter_by_status(search_candidates(_candidates(), term), status)
        return [c.name for c in filter_by_min_score(found, min_score)]

    assert shown("x.com", "all", None) == ["Jane Doe", "Ann Lee"]
    assert shown("x.com", "hired", 70) == ["Ann Lee"]
    assert shown("x.com", "all", 71) == []
    assert shown("", "all", 85) == ["John Roe"]


def test_skill_frequency():
    assert skill_frequency(_candidates(), top_n=1) == [("SQL", 2)]


def test_experience_distribution():
    assert experience_distribution(_candidates()) == [
        ("0-2 years", 1),
        ("3-5 years", 1),
        ("6-10 years", 0),
        ("10+ years", 1),
    ]


def test_status_distribution_drops_empty_statuses():
    assert status_distribution(_candidates()) == [("applied", 1), ("shortlisted", 1), ("hired", 1)]


def test_top_candidates_ties_keep_upload_order():
    assert [c.name for c in top_candidates(_candidates(), n=3)] == ["John Roe", "Jane Doe", "Ann Lee"]


def test_score_source_counts():
    assert score_source_counts(_candidates()) == (1, 2)
