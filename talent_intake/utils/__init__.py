"""Utility exports."""

from .helpers import EMAIL_PATTERN, dedupe_preserving_order, parse_leading_int, parse_llm_json
from .logger import get_logger

__all__ = [
    "get_logger",
    "EMAIL_PATTERN",
    "dedupe_preserving_order",
    "parse_leading_int",
    "parse_llm_json",
]
