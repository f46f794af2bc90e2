"""Candidate intake pipeline: CSV rows and resume files to normalized candidate records."""

from .csv_parser import extract_csv_fields, parse_csv
from .normalizer import normalize_candidate
from .resume_parser import parse_resume, parse_resume_text
from .text_extractor import extract_text_from_file

__all__ = [
    "parse_csv",
    "extract_csv_fields",
    "parse_resume",
    "parse_resume_text",
    "normalize_candidate",
    "extract_text_from_file",
]
