"""Exceptions surfaced to ytcompat callers."""


class ExtractionFailed(RuntimeError):
    """Raised when metadata for a URL could not be extracted."""
