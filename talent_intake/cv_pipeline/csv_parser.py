"""
CSV candidate extraction.

The format is deliberately naive: the first line is the header, cells are
split on commas with no quoting or escaping. A value containing a comma
misaligns the rest of its line; lines left with fewer cells than headers
are dropped.
"""

import re
from typing import Dict, Iterable, List, Optional

from ..schemas.candidate import ExtractedFields
from ..utils.helpers import dedupe_preserving_order, parse_leading_int
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Column-name aliases per field, in priority order
FIELD_ALIASES: Dict[str, tuple] = {
    "name": ("name", "full_name"),
    "email": ("email",),
    "phone": ("phone", "mobile"),
    "position": ("position", "role", "job_title"),
    "skills": ("skills", "skill"),
    "experience": ("experience", "years"),
    "education": ("education", "degree"),
}

SKILL_SEPARATORS = re.compile(r"[,|;]")


def _clean_cell(value: str) -> str:
    return value.strip().strip('"').strip()


def _first_alias(row: Dict[str, str], aliases: Iterable[str]) -> Optional[str]:
    """Value of the first alias present with a non-empty value."""
    for alias in aliases:
        value = row.get(alias)
        if value:
            return value
    return None


def split_skills(raw: Optional[str]) -> List[str]:
    """Split a skills cell on comma, pipe or semicolon; trim and drop empty tokens and duplicates."""
    if not raw:
        return []
    tokens = (_clean_cell(t) for t in SKILL_SEPARATORS.split(raw))
    return dedupe_preserving_order(t for t in tokens if t)


def extract_csv_fields(row: Dict[str, str]) -> ExtractedFields:
    """Resolve candidate fields from one header→value mapping using FIELD_ALIASES."""
    return ExtractedFields(
        name=_first_alias(row, FIELD_ALIASES["name"]),
        email=_first_alias(row, FIELD_ALIASES["email"]),
        phone=_first_alias(row, FIELD_ALIASES["phone"]),
        position=_first_alias(row, FIELD_ALIASES["position"]),
        skills=split_skills(_first_alias(row, FIELD_ALIASES["skills"])),
        experience=parse_leading_int(_first_alias(row, FIELD_ALIASES["experience"])),
        education=_first_alias(row, FIELD_ALIASES["education"]),
    )


def iter_csv_rows(csv_text: str) -> Iterable[Dict[str, str]]:
    """Yield lower-cased header → cell mappings, skipping blank and short lines."""
    # Only "\n" ends a record; \r is trimmed per cell and U+2028 stays inside its cell
    lines = (csv_text or "").strip().split("\n")
    if len(lines) < 2:
        return
    headers = [_clean_cell(h).lower() for h in lines[0].split(",")]
    for line_no, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        values = [_clean_cell(v) for v in line.split(",")]
        if len(values) < len(headers):
            logger.debug(
                "Skipping CSV line %s: %s values for %s headers", line_no, len(values), len(headers)
            )
            continue
        yield dict(zip(headers, values))


def parse_csv(csv_text: str) -> List[ExtractedFields]:
    """Parse CSV text into one ExtractedFields per usable data line."""
    return [extract_csv_fields(row) for row in iter_csv_rows(csv_text)]
