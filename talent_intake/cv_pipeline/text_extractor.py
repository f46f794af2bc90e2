"""
Turn uploaded resume files (PDF, DOCX) into plain text, in memory only.

Line breaks are kept: the name heuristics are line-based (the name is the
first capitalized letters-only line, or one of the lines just above the
email), so collapsing the text into one paragraph would break them.
Only horizontal whitespace and runs of blank lines are squeezed.
"""

import os
import re
import unicodedata
from io import BytesIO
from typing import Callable, Dict, Optional

import pdfplumber
from docx import Document

from ..config import RESUME_EXTENSIONS
from ..utils.logger import get_logger

logger = get_logger(__name__)

MAX_RESUME_CHARS = 50000


def _normalize_unicode(text: str) -> str:
    if not text:
        return ""
    return unicodedata.normalize("NFC", text)


def _clean_resume_text(text: str, max_chars: int = MAX_RESUME_CHARS) -> str:
    """
    Normalize a resume to one line per source line.
    Runs of spaces/tabs become one space, each line is trimmed, and three or
    more line breaks shrink to a single blank line. Line breaks themselves
    survive because the name heuristics work per line.
    """
    if not text or not text.strip():
        return ""
    t = _normalize_unicode(text)
    t = t.replace("\r\n", "\n").replace("\r", "\n")
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r" ?\n ?", "\n", t)
    t = re.sub(r"\n{3,}", "\n\n", t)
    return t.strip()[:max_chars]


def _pdf_text(data: BytesIO) -> Optional[str]:
    with pdfplumber.open(data) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n\n".join(p for p in pages if p.strip()) or None


def _docx_text(data: BytesIO) -> Optional[str]:
    # One paragraph per line; empty paragraphs carry no field
    doc = Document(data)
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip()) or None


_EXTRACTORS: Dict[str, Callable[[BytesIO], Optional[str]]] = {
    ".pdf": _pdf_text,
    ".docx": _docx_text,
}


def extract_text_from_file(file_bytes: bytes, filename: str) -> Optional[str]:
    """
    Extract and clean the text of an uploaded resume.
    Returns None for an unsupported extension, an unreadable file or a file with no text.
    """
    ext = os.path.splitext((filename or "").strip().lower())[1]
    extractor = _EXTRACTORS.get(ext) if ext in RESUME_EXTENSIONS else None
    if extractor is None:
        logger.warning("Unsupported resume type: %s", filename)
        return None

    try:
        raw = extractor(BytesIO(file_bytes))
    except Exception as e:
        logger.exception("Text extraction failed for %s (%s bytes): %s", filename, len(file_bytes or b""), e)
        return None

    if not raw or not raw.strip():
        logger.info("No text found in %s", filename)
        return None
    return _clean_resume_text(raw)
