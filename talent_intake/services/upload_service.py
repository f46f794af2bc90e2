"""
Upload orchestration: CSV batches and single resumes to stored, scored candidates.

Each record is scored by the evaluation service when one is configured; any
failure there (exception, None, unparsable reply) falls back to
estimate_fallback_score for that record only. Records are stored after the
whole batch is scored, then one upload entry is recorded. Repository errors
propagate to the caller; records already stored are not rolled back.
"""

import asyncio
import random
from typing import Coroutine, List, Optional, Tuple, TypeVar

from ..config import EVALUATION_CONCURRENCY, MAX_UPLOAD_BYTES, RESUME_EXTENSIONS
from ..cv_pipeline.csv_parser import parse_csv
from ..cv_pipeline.normalizer import normalize_candidate
from ..cv_pipeline.resume_parser import parse_resume
from ..errors import InvalidUploadError, UnsupportedFileTypeError
from ..schemas.candidate import (
    DEFAULT_SKILL,
    CandidateRecord,
    CsvUploadResult,
    ExtractedFields,
    ResumeUploadResult,
)
from ..scoring.evaluation_service import EvaluationService
from ..scoring.fallback_scorer import estimate_fallback_score
from ..storage.repository import CandidateRepository
from ..utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def _check_payload(file_bytes: bytes, filename: str) -> None:
    if not file_bytes:
        raise InvalidUploadError(f"No file content uploaded ({filename or 'unnamed'})")
    if len(file_bytes) > MAX_UPLOAD_BYTES:
        raise InvalidUploadError(
            f"{filename or 'Upload'} is {len(file_bytes)} bytes; the limit is {MAX_UPLOAD_BYTES}"
        )


def _skill_count(fields: ExtractedFields) -> int:
    # The "General Skills" placeholder is not a skill
    return sum(1 for s in fields.skills if s and s != DEFAULT_SKILL)


def _run_sync(coro: Coroutine[None, None, T]) -> T:
    """Run a coroutine on a fresh event loop; safe to call from sync context (e.g. Streamlit)."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


class UploadOrchestrator:
    """Drives extraction, normalization, scoring and storage for one upload at a time."""

    def __init__(
        self,
        repository: CandidateRepository,
        evaluation_service: Optional[EvaluationService] = None,
        concurrency: int = EVALUATION_CONCURRENCY,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._repository = repository
        self._evaluation_service = evaluation_service
        self._concurrency = max(1, concurrency)
        self._rng = rng

    async def _score(self, record: CandidateRecord, skill_count: int) -> CandidateRecord:
        """Score one record; never raises. skill_count excludes the placeholder skill."""
        evaluation = None
        if self._evaluation_service is not None:
            try:
                evaluation = await self._evaluation_service.evaluate(record.summary_text())
            except Exception as e:
                logger.warning("Evaluation raised for %s: %s", record.name, e)
        if evaluation is not None:
            return record.model_copy(
                update={"overall_score": evaluation.overall_score, "score_source": "ai"}
            )
        score = estimate_fallback_score(
            record.experience, skill_count, record.position, rng=self._rng
        )
        if self._evaluation_service is not None:
            logger.warning("AI evaluation unavailable for %s; fallback score %s", record.name, score)
        return record.model_copy(update={"overall_score": score, "score_source": "fallback"})

    async def _score_all(self, items: List[Tuple[CandidateRecord, int]]) -> List[CandidateRecord]:
        """Score records with at most `concurrency` evaluations in flight; keeps input order."""
        sem = asyncio.Semaphore(self._concurrency)

        async def task(record: CandidateRecord, skill_count: int) -> CandidateRecord:
            async with sem:
                return await self._score(record, skill_count)

        return list(await asyncio.gather(*[task(r, n) for r, n in items]))

    async def process_csv_upload_async(self, file_bytes: bytes, filename: str) -> CsvUploadResult:
        """Parse, score and store every usable CSV line; short lines are skipped and not counted."""
        _check_payload(file_bytes, filename)
        csv_text = file_bytes.decode("utf-8-sig", errors="replace")
        items = [(normalize_candidate(fields, "csv"), _skill_count(fields)) for fields in parse_csv(csv_text)]
        logger.info("CSV upload %s: %s candidate rows parsed", filename, len(items))

        scored = await self._score_all(items)
        stored = [self._repository.create_candidate(r) for r in scored]
        upload = self._repository.create_upload_entry(filename, len(stored), "csv")

        fallback_count = sum(1 for c in stored if c.score_source == "fallback")
        logger.info(
            "CSV upload %s finished: candidates=%s fallback_scored=%s",
            filename, len(stored), fallback_count,
        )
        return CsvUploadResult(
            candidates=stored, count=len(stored), upload=upload, fallback_count=fallback_count
        )

    async def process_pdf_upload_async(self, file_bytes: bytes, filename: str) -> ResumeUploadResult:
        """Treat the file as exactly one candidate. Accepts PDF and DOCX resumes."""
        _check_payload(file_bytes, filename)
        name_lower = (filename or "").lower().strip()
        if not name_lower.endswith(RESUME_EXTENSIONS):
            raise UnsupportedFileTypeError(f"Only PDF or DOCX resumes are accepted, got {filename!r}")
        upload_type = "docx" if name_lower.endswith(".docx") else "pdf"

        parsed = parse_resume(file_bytes, filename)
        (scored,) = await self._score_all([(normalize_candidate(parsed, "resume"), _skill_count(parsed))])
        stored = self._repository.create_candidate(
            scored,
            resume_data={
                "filename": filename,
                "upload_type": upload_type,
                "parsed": parsed.model_dump(),
            },
        )
        upload = self._repository.create_upload_entry(filename, 1, upload_type)
        logger.info(
            "Resume upload %s finished: candidate=%s score=%s (%s)",
            filename, stored.id, stored.overall_score, stored.score_source,
        )
        return ResumeUploadResult(candidate=stored, parsed_resume=parsed, upload=upload)

    def process_csv_upload(self, file_bytes: bytes, filename: str) -> CsvUploadResult:
        return _run_sync(self.process_csv_upload_async(file_bytes, filename))

    def process_pdf_upload(self, file_bytes: bytes, filename: str) -> ResumeUploadResult:
        return _run_sync(self.process_pdf_upload_async(file_bytes, filename))
