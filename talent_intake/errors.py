"""Errors raised to callers of the upload operations."""


class TalentIntakeError(ValueError):
    """Base class for rejected uploads."""


class InvalidUploadError(TalentIntakeError):
    """Empty or oversized upload payload."""


class UnsupportedFileTypeError(TalentIntakeError):
    """Resume upload that is neither PDF nor DOCX."""
