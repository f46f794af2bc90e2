"""Helper utilities shared by the parsers and evaluation providers."""

import json
import re
from typing import Iterable, List, Optional

EMAIL_PATTERN = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"


def dedupe_preserving_order(values: Iterable[str]) -> List[str]:
    """Drop duplicates, keeping the first occurrence of each value."""
    return list(dict.fromkeys(values))


def parse_leading_int(value: Optional[str]) -> int:
    """
    Parse the leading digits of a string ("5", "5 years", " 12+").
    Anything without leading digits (including negatives) yields 0.
    """
    if not value:
        return 0
    m = re.match(r"\s*(\d+)", value)
    return int(m.group(1)) if m else 0


def parse_llm_json(text: str) -> Optional[dict]:
    """Parse a JSON object from an LLM response, stripping markdown code blocks if present."""
    raw = (text or "").strip()
    if raw.startswith("```"):
        raw = re.sub(r"^```(?:json)?\s*", "", raw)
        raw = re.sub(r"\s*```$", "", raw)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None
