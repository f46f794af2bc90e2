"""Candidate repository: abstract interface and the in-memory implementation."""

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config import CANDIDATE_STATUSES
from ..schemas.candidate import CandidateRecord, StoredCandidate, UploadEntry, UploadType
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Fields that may change after a candidate is created
MUTABLE_FIELDS = ("status", "overall_score", "score_source")


class CandidateNotFoundError(KeyError):
    """Raised when updating a candidate id the repository does not hold."""


class CandidateRepository(ABC):
    """Storage for candidates and upload provenance. Implementations own their state."""

    @abstractmethod
    def create_candidate(
        self, record: CandidateRecord, resume_data: Optional[Dict[str, Any]] = None
    ) -> StoredCandidate:
        ...

    @abstractmethod
    def get_candidate(self, candidate_id: str) -> Optional[StoredCandidate]:
        ...

    @abstractmethod
    def list_candidates(self) -> List[StoredCandidate]:
        ...

    @abstractmethod
    def update_candidate(self, candidate_id: str, **changes: Any) -> StoredCandidate:
        """Change status and/or overall_score. Raises CandidateNotFoundError or ValueError."""
        ...

    @abstractmethod
    def delete_candidate(self, candidate_id: str) -> bool:
        ...

    @abstractmethod
    def create_upload_entry(
        self, filename: str, candidates_count: int, upload_type: UploadType = "csv"
    ) -> UploadEntry:
        ...

    @abstractmethod
    def list_upload_entries(self) -> List[UploadEntry]:
        ...


@dataclass
class _RepositoryState:
    """All mutable state of one in-memory repository."""

    candidates: Dict[str, StoredCandidate] = field(default_factory=dict)
    uploads: Dict[str, UploadEntry] = field(default_factory=dict)
    lock: threading.Lock = field(default_factory=threading.Lock)


class InMemoryCandidateRepository(CandidateRepository):
    """
    Process-local repository: one dict per entity, insertion ordered.
    No persistence or eviction. Create one at startup and pass it to whoever needs it.
    """

    def __init__(self) -> None:
        self._state = _RepositoryState()

    def create_candidate(
        self, record: CandidateRecord, resume_data: Optional[Dict[str, Any]] = None
    ) -> StoredCandidate:
        stored = StoredCandidate(**record.model_dump(), resume_data=resume_data)
        with self._state.lock:
            self._state.candidates[stored.id] = stored
        return stored

    def get_candidate(self, candidate_id: str) -> Optional[StoredCandidate]:
        return self._state.candidates.get(candidate_id)

    def list_candidates(self) -> List[StoredCandidate]:
        with self._state.lock:
            return list(self._state.candidates.values())

    def update_candidate(self, candidate_id: str, **changes: Any) -> StoredCandidate:
        unknown = set(changes) - set(MUTABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update candidate fields: {', '.join(sorted(unknown))}")
        status = changes.get("status")
        if status is not None and status not in CANDIDATE_STATUSES:
            raise ValueError(f"Unknown candidate status: {status}")
        with self._state.lock:
            current = self._state.candidates.get(candidate_id)
            if current is None:
                raise CandidateNotFoundError(candidate_id)
            # model_validate re-checks the 0-100 score bound
            updated = StoredCandidate.model_validate({**current.model_dump(), **changes})
            self._state.candidates[candidate_id] = updated
        logger.info("Updated candidate %s: %s", candidate_id, changes)
        return updated

    def delete_candidate(self, candidate_id: str) -> bool:
        with self._state.lock:
            return self._state.candidates.pop(candidate_id, None) is not None

    def create_upload_entry(
        self, filename: str, candidates_count: int, upload_type: UploadType = "csv"
    ) -> UploadEntry:
        entry = UploadEntry(filename=filename, candidates_count=candidates_count, upload_type=upload_type)
        with self._state.lock:
            self._state.uploads[entry.id] = entry
        return entry

    def list_upload_entries(self) -> List[UploadEntry]:
        with self._state.lock:
            return list(self._state.uploads.values())
