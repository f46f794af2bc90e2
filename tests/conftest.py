"""Shared fixtures: fake evaluation providers, repositories and sample uploads."""

import io
from typing import Dict, List, Optional

import pytest
from docx import Document

from talent_intake.schemas.evaluation import CandidateEvaluation
from talent_intake.scoring.evaluation_service import EvaluationService
from talent_intake.storage.repository import InMemoryCandidateRepository

SAMPLE_CSV = (
    "name,email,position,skills,experience\n"
    "Jane Doe,jane@x.com,Senior Engineer,Go|Rust,5\n"
    "John Roe,john@x.com,Designer,Figma;Sketch,2\n"
    "Ann Lee,ann@x.com,Analyst,SQL|Excel|Python,7\n"
)


class FixedScoreEvaluator(EvaluationService):
    """Scores every candidate with the same value and records the summaries it saw."""

    name = "fixed"

    def __init__(self, score: int = 77) -> None:
        self.score = score
        self.summaries: List[str] = []

    async def evaluate(self, candidate_summary: str) -> Optional[CandidateEvaluation]:
        self.summaries.append(candidate_summary)
        return CandidateEvaluation(overallScore=self.score, recommendation="interview")


class RaisingEvaluator(EvaluationService):
    name = "raising"

    def __init__(self) -> None:
        self.calls = 0

    async def evaluate(self, candidate_summary: str) -> Optional[CandidateEvaluation]:
        self.calls += 1
        raise TimeoutError("evaluation timed out")


class PerNameEvaluator(EvaluationService):
    """Score by candidate name; names missing from the map get None (provider failure)."""

    name = "per-name"

    def __init__(self, scores: Dict[str, int]) -> None:
        self.scores = scores

    async def evaluate(self, candidate_summary: str) -> Optional[CandidateEvaluation]:
        name = candidate_summary.splitlines()[0].removeprefix("Name: ").strip()
        if name not in self.scores:
            return None
        return CandidateEvaluation(overallScore=self.scores[name])


class BrokenRepository(InMemoryCandidateRepository):
    def create_candidate(self, record, resume_data=None):
        raise RuntimeError("store unavailable")


@pytest.fixture
def repository() -> InMemoryCandidateRepository:
    return InMemoryCandidateRepository()


@pytest.fixture
def sample_csv_bytes() -> bytes:
    return SAMPLE_CSV.encode("utf-8")


def make_docx(lines: List[str]) -> bytes:
    doc = Document()
    for line in lines:
        doc.add_paragraph(line)
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()
