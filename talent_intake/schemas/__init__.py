"""Schema exports."""

from .candidate import (
    CandidateRecord,
    CsvUploadResult,
    ExtractedFields,
    ResumeUploadResult,
    StoredCandidate,
    UploadEntry,
)
from .evaluation import CandidateEvaluation

__all__ = [
    "ExtractedFields",
    "CandidateRecord",
    "StoredCandidate",
    "UploadEntry",
    "CsvUploadResult",
    "ResumeUploadResult",
    "CandidateEvaluation",
]
