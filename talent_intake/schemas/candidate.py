"""Candidate schemas: extracted fields, normalized records, stored records and upload results."""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

# Defaults applied by the record normalizer
UNKNOWN_CSV_NAME = "Unknown"
UNKNOWN_RESUME_NAME = "Unknown Candidate"
UNKNOWN_EMAIL = "unknown@example.com"
UNKNOWN_POSITION = "Not specified"
DEFAULT_SKILL = "General Skills"
DEFAULT_STATUS = "applied"

ScoreSource = Literal["ai", "fallback"]
UploadType = Literal["csv", "pdf", "docx"]


def _new_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ExtractedFields(BaseModel):
    """Partial candidate attributes produced by the CSV or resume field extractor."""

    name: Optional[str] = Field(default=None, description="Candidate full name")
    email: Optional[str] = Field(default=None, description="Contact email")
    phone: Optional[str] = Field(default=None, description="Phone or mobile number")
    position: Optional[str] = Field(default=None, description="Position or job title applied for")
    skills: List[str] = Field(default_factory=list, description="Skills, de-duplicated, first-seen order")
    experience: Optional[int] = Field(default=None, ge=0, description="Years of experience")
    education: Optional[str] = Field(default=None, description="Degree or education summary")


class CandidateRecord(BaseModel):
    """Complete candidate record: every field populated, score assigned by evaluation or fallback."""

    name: str = Field(..., min_length=1)
    email: str = Field(default=UNKNOWN_EMAIL)
    phone: Optional[str] = None
    position: str = Field(default=UNKNOWN_POSITION)
    skills: List[str] = Field(default_factory=lambda: [DEFAULT_SKILL], min_length=1)
    experience: int = Field(default=0, ge=0)
    education: Optional[str] = None
    overall_score: int = Field(default=0, ge=0, le=100, description="0-100 suitability score")
    status: str = Field(default=DEFAULT_STATUS)
    score_source: ScoreSource = Field(
        default="fallback",
        description="'ai' when scored by the evaluation service, 'fallback' for the heuristic estimate",
    )

    def summary_text(self) -> str:
        """Plain-text summary sent to the evaluation service."""
        return (
            f"Name: {self.name}\n"
            f"Position: {self.position}\n"
            f"Experience: {self.experience} years\n"
            f"Skills: {', '.join(self.skills)}\n"
            f"Email: {self.email}"
        )


class StoredCandidate(CandidateRecord):
    """Candidate record as held by the repository."""

    id: str = Field(default_factory=_new_id)
    applied_date: datetime = Field(default_factory=_utc_now)
    resume_data: Optional[Dict[str, Any]] = Field(
        default=None, description="Resume uploads only: filename, upload type and parsed fields"
    )


class UploadEntry(BaseModel):
    """Provenance of one upload: which file, how many candidates, when."""

    id: str = Field(default_factory=_new_id)
    filename: str
    candidates_count: int = Field(..., ge=0)
    upload_type: UploadType = "csv"
    uploaded_date: datetime = Field(default_factory=_utc_now)


class CsvUploadResult(BaseModel):
    """Result of a CSV upload. degraded is True when any record used fallback scoring."""

    candidates: List[StoredCandidate] = Field(default_factory=list)
    count: int = 0
    upload: UploadEntry
    fallback_count: int = 0

    @property
    def degraded(self) -> bool:
        return self.fallback_count > 0


class ResumeUploadResult(BaseModel):
    """Result of a single-resume (PDF/DOCX) upload."""

    candidate: StoredCandidate
    parsed_resume: ExtractedFields
    upload: UploadEntry

    @property
    def degraded(self) -> bool:
        return self.candidate.score_source == "fallback"
