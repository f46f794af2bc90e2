"""
Heuristic field extraction from resume text (PDF or DOCX dumps).

Position and skills come from fixed keyword dictionaries matched as
case-insensitive substrings. Matching follows dictionary order, not
document order, so "Designer" beats "Analyst" wherever each appears and
"Java" also matches inside "JavaScript". Known weak heuristics; kept
stable so repeated uploads resolve the same way.
"""

import re
from typing import List, Optional

from ..schemas.candidate import (
    DEFAULT_SKILL,
    UNKNOWN_EMAIL,
    UNKNOWN_POSITION,
    UNKNOWN_RESUME_NAME,
    ExtractedFields,
)
from ..utils.helpers import EMAIL_PATTERN
from ..utils.logger import get_logger
from .text_extractor import extract_text_from_file

logger = get_logger(__name__)

POSITION_KEYWORDS: List[str] = [
    "Software Engineer",
    "Software Developer",
    "Frontend Developer",
    "Backend Developer",
    "Full Stack Developer",
    "Data Scientist",
    "Product Manager",
    "Designer",
    "DevOps Engineer",
    "QA Engineer",
    "Project Manager",
    "Analyst",
]

SKILL_KEYWORDS: List[str] = [
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "PHP", "Ruby",
    "React", "Angular", "Vue", "Node.js", "Express", "Django", "Flask",
    "HTML", "CSS", "SASS", "SCSS", "Bootstrap", "Tailwind",
    "SQL", "MySQL", "PostgreSQL", "MongoDB", "Redis",
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Git",
    "REST", "GraphQL", "API", "Microservices", "Agile", "Scrum",
]

# A capitalised run of letters alone on its line, e.g. "Jane Doe"
_NAME_LINE = re.compile(r"^[ \t]*([A-Z][a-zA-Z \t]{2,30})[ \t]*$", re.MULTILINE)
_LETTERS_ONLY = re.compile(r"^[A-Za-z\s]+$")
_EXPERIENCE = re.compile(r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s*)?experience", re.IGNORECASE)
_EMAIL = re.compile(EMAIL_PATTERN)


def _looks_like_name(line: str) -> bool:
    return 2 < len(line) < 50 and bool(_LETTERS_ONLY.match(line))


def _find_name(text: str, email_match: Optional[re.Match]) -> str:
    m = _NAME_LINE.search(text)
    if m:
        return m.group(1).strip()

    if email_match:
        # Nearest first; the last entry is whatever precedes the email on its own line
        preceding = text[: email_match.start()].split("\n")[-3:]
        for line in reversed(preceding):
            candidate = line.strip()
            if _looks_like_name(candidate):
                return candidate
        return UNKNOWN_RESUME_NAME

    lines = [l.strip() for l in text.split("\n") if len(l.strip()) > 2]
    if lines and _looks_like_name(lines[0]):
        return lines[0]
    return UNKNOWN_RESUME_NAME


def _find_position(lowered: str) -> str:
    for keyword in POSITION_KEYWORDS:
        if keyword.lower() in lowered:
            return keyword
    return UNKNOWN_POSITION


def _find_skills(lowered: str) -> List[str]:
    return [skill for skill in SKILL_KEYWORDS if skill.lower() in lowered]


def default_resume_fields() -> ExtractedFields:
    """All-placeholder record used when a resume cannot be read at all."""
    return ExtractedFields(
        name=UNKNOWN_RESUME_NAME,
        email=UNKNOWN_EMAIL,
        position=UNKNOWN_POSITION,
        skills=[DEFAULT_SKILL],
        experience=0,
    )


def parse_resume_text(text: str) -> ExtractedFields:
    """Resolve name, email, position, skills and experience from resume text."""
    text = text or ""
    lowered = text.lower()
    email_match = _EMAIL.search(text)
    experience_match = _EXPERIENCE.search(text)
    skills = _find_skills(lowered)
    return ExtractedFields(
        name=_find_name(text, email_match),
        email=email_match.group(0) if email_match else UNKNOWN_EMAIL,
        position=_find_position(lowered),
        skills=skills or [DEFAULT_SKILL],
        experience=int(experience_match.group(1)) if experience_match else 0,
    )


def parse_resume(file_bytes: bytes, filename: str) -> ExtractedFields:
    """
    Extract text from a resume file and resolve its fields.
    Never raises: unreadable files and unexpected failures give the placeholder record.
    """
    try:
        text = extract_text_from_file(file_bytes, filename)
        if not text:
            logger.warning("No text extracted from %s; using placeholder fields", filename)
        return parse_resume_text(text or "")
    except Exception as e:
        logger.exception("Resume parsing failed for %s: %s", filename, e)
        return default_resume_fields()
