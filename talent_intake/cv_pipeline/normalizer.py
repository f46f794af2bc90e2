"""Fill missing extracted fields with their defaults to produce a complete CandidateRecord."""

from typing import Literal

from ..schemas.candidate import (
    DEFAULT_SKILL,
    DEFAULT_STATUS,
    UNKNOWN_CSV_NAME,
    UNKNOWN_EMAIL,
    UNKNOWN_POSITION,
    UNKNOWN_RESUME_NAME,
    CandidateRecord,
    ExtractedFields,
)

RecordSource = Literal["csv", "resume"]


def _text_or(value, default: str) -> str:
    value = (value or "").strip()
    return value or default


def normalize_candidate(fields: ExtractedFields, source: RecordSource = "csv") -> CandidateRecord:
    """
    Pure mapping from ExtractedFields to CandidateRecord. No I/O, cannot fail.
    overall_score is a placeholder until the upload orchestrator scores the record.
    """
    default_name = UNKNOWN_CSV_NAME if source == "csv" else UNKNOWN_RESUME_NAME
    skills = [s.strip() for s in fields.skills if s and s.strip()]
    return CandidateRecord(
        name=_text_or(fields.name, default_name),
        email=_text_or(fields.email, UNKNOWN_EMAIL),
        phone=(fields.phone or "").strip() or None,
        position=_text_or(fields.position, UNKNOWN_POSITION),
        skills=list(dict.fromkeys(skills)) or [DEFAULT_SKILL],
        experience=max(0, fields.experience or 0),
        education=(fields.education or "").strip() or None,
        overall_score=0,
        status=DEFAULT_STATUS,
        score_source="fallback",
    )
