"""Candidate evaluation via LLM: OpenAI or Gemini (config-based)."""

import asyncio
from abc import ABC, abstractmethod
from typing import Optional

import httpx
from openai import AsyncOpenAI
from pydantic import ValidationError

from ..config import (
    EVALUATION_PROVIDER,
    GEMINI_API_KEY,
    GEMINI_MODEL,
    HTTP_MAX_RETRIES,
    HTTP_TIMEOUT_SECONDS,
    MODEL_NAME,
    OPENAI_API_KEY,
)
from ..schemas.evaluation import CandidateEvaluation
from ..utils.helpers import parse_llm_json
from ..utils.logger import get_logger

logger = get_logger(__name__)

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"

EVALUATION_SYSTEM_PROMPT = """You are an experienced technical recruiter.
Evaluate the candidate summary below for general hiring suitability.
Return only valid JSON matching this schema (no markdown, no code block):
{
  "overallScore": number (0-100),
  "strengths": ["string"],
  "weaknesses": ["string"],
  "recommendation": "hire" | "reject" | "interview",
  "reasoning": "string"
}"""


def parse_evaluation(text: Optional[str]) -> Optional[CandidateEvaluation]:
    """Validate an LLM reply. Returns None for invalid JSON or a missing/non-numeric overallScore."""
    parsed = parse_llm_json(text or "")
    if not parsed:
        logger.warning("Evaluation reply is not a JSON object")
        return None
    try:
        return CandidateEvaluation.model_validate(parsed)
    except ValidationError as e:
        logger.warning("Evaluation reply validation failed: %s", e)
        return None


class EvaluationService(ABC):
    """Abstract candidate evaluation provider."""

    name: str = "abstract"

    @abstractmethod
    async def evaluate(self, candidate_summary: str) -> Optional[CandidateEvaluation]:
        """Evaluate one candidate summary. Returns None when the provider fails."""
        ...


class OpenAIEvaluationService(EvaluationService):
    """OpenAI chat completions with a JSON response format."""

    name = "openai"

    def __init__(
        self,
        api_key: str = OPENAI_API_KEY,
        model: str = MODEL_NAME,
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._client = client

    async def _complete(self, client: AsyncOpenAI, candidate_summary: str) -> Optional[CandidateEvaluation]:
        response = await client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": EVALUATION_SYSTEM_PROMPT},
                {"role": "user", "content": f"Candidate summary:\n\n{candidate_summary}"},
            ],
            response_format={"type": "json_object"},
            temperature=0.1,
        )
        choice = response.choices[0] if response.choices else None
        if not choice or not choice.message or not choice.message.content:
            return None
        return parse_evaluation(choice.message.content)

    async def evaluate(self, candidate_summary: str) -> Optional[CandidateEvaluation]:
        try:
            if self._client is not None:
                return await self._complete(self._client, candidate_summary)
            # Owned client is closed per call: sync uploads run each batch on its own event loop
            async with AsyncOpenAI(api_key=self._api_key, timeout=HTTP_TIMEOUT_SECONDS) as client:
                return await self._complete(client, candidate_summary)
        except Exception as e:
            logger.exception("OpenAI evaluation failed: %s", e)
            return None


class GeminiEvaluationService(EvaluationService):
    """Gemini generateContent over the public REST API, with retry on transient failures."""

    name = "gemini"

    def __init__(
        self,
        api_key: str = GEMINI_API_KEY,
        model: str = GEMINI_MODEL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._transport = transport

    def _payload(self, candidate_summary: str) -> dict:
        return {
            "contents": [
                {
                    "parts": [
                        {"text": f"{EVALUATION_SYSTEM_PROMPT}\n\nCandidate summary:\n\n{candidate_summary}"}
                    ]
                }
            ],
            "generationConfig": {"temperature": 0.1, "responseMimeType": "application/json"},
        }

    @staticmethod
    def _reply_text(data: dict) -> Optional[str]:
        try:
            parts = data["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError):
            return None
        return "".join(p.get("text", "") for p in parts if isinstance(p, dict)) or None

    async def _post(self, candidate_summary: str) -> Optional[dict]:
        url = f"{GEMINI_API_BASE}/{self._model}:generateContent"
        last_error: Optional[Exception] = None
        for attempt in range(HTTP_MAX_RETRIES):
            try:
                async with httpx.AsyncClient(
                    timeout=HTTP_TIMEOUT_SECONDS,
                    transport=self._transport,
                    headers={"x-goog-api-key": self._api_key},
                ) as client:
                    response = await client.post(url, json=self._payload(candidate_summary))
                    response.raise_for_status()
                    return response.json()
            except httpx.HTTPStatusError as e:
                last_error = e
                logger.warning("Gemini HTTP error %s: %s", e.response.status_code, str(e))
                if 400 <= e.response.status_code < 500 and e.response.status_code != 429:
                    break  # Don't retry client errors
            except (httpx.TimeoutException, httpx.ConnectError) as e:
                last_error = e
                logger.warning("Gemini request failed (attempt %s): %s", attempt + 1, str(e))
            except Exception as e:
                last_error = e
                logger.exception("Unexpected error calling Gemini")
                break
            if attempt + 1 < HTTP_MAX_RETRIES:
                await asyncio.sleep(1.0 * (attempt + 1))  # Backoff

        if last_error:
            logger.error("Gemini evaluation failed after %s attempts: %s", HTTP_MAX_RETRIES, last_error)
        return None

    async def evaluate(self, candidate_summary: str) -> Optional[CandidateEvaluation]:
        data = await self._post(candidate_summary)
        if not data:
            return None
        return parse_evaluation(self._reply_text(data))


def get_evaluation_service(provider: Optional[str] = None) -> Optional[EvaluationService]:
    """
    Return the configured evaluation service (dependency injection).
    provider: override config; None uses EVALUATION_PROVIDER.
    Returns None when evaluation is disabled or its API key is missing; uploads then use fallback scoring.
    """
    p = (provider or EVALUATION_PROVIDER).strip().lower()
    if p == "openai":
        if not OPENAI_API_KEY:
            logger.warning("OPENAI_API_KEY not set; candidates will get fallback scores")
            return None
        return OpenAIEvaluationService(api_key=OPENAI_API_KEY, model=MODEL_NAME)
    if p == "gemini":
        if not GEMINI_API_KEY:
            logger.warning("GEMINI_API_KEY not set; candidates will get fallback scores")
            return None
        return GeminiEvaluationService(api_key=GEMINI_API_KEY, model=GEMINI_MODEL)
    if p not in ("none", ""):
        logger.warning("Unknown EVALUATION_PROVIDER %r; candidates will get fallback scores", p)
    return None
