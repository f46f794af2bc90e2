"""Configuration loaded from environment variables."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# API keys – never hardcode
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")
GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")


def env_int(name: str, default: int, minimum: int = 1) -> int:
    """Integer env var; unparsable values fall back to default with a warning."""
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    try:
        return max(minimum, int(raw))
    except ValueError:
        logging.getLogger(__name__).warning("%s=%r is not an integer; using %s", name, raw, default)
        return default


# Candidate evaluation: "openai", "gemini" or "none" (fallback scoring only)
EVALUATION_PROVIDER: str = os.getenv("EVALUATION_PROVIDER", "openai")
# 1 keeps evaluation calls sequential per upload
EVALUATION_CONCURRENCY: int = env_int("EVALUATION_CONCURRENCY", 1)

# HTTP settings (evaluation providers)
HTTP_TIMEOUT_SECONDS: float = 30.0
HTTP_MAX_RETRIES: int = 3

# Uploads
MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024
RESUME_EXTENSIONS: tuple = (".pdf", ".docx")

# Logging
LOG_LEVEL: int = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
if not isinstance(LOG_LEVEL, int):
    LOG_LEVEL = logging.INFO

# Candidate pipeline statuses, in review order
CANDIDATE_STATUSES: list = [
    "applied",
    "shortlisted",
    "interviewed",
    "rejected",
    "hired",
]
