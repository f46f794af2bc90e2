"""Talent Intake: candidate uploads, heuristic extraction and LLM-backed scoring."""

__version__ = "0.1.0"
