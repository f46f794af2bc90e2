"""Candidate storage."""

from .repository import CandidateNotFoundError, CandidateRepository, InMemoryCandidateRepository

__all__ = ["CandidateRepository", "InMemoryCandidateRepository", "CandidateNotFoundError"]
