class SourceError(Exception):
    """Base exception for all raw source errors."""


class SourceReadError(SourceError):
    """Raised when raw values cannot be read from the configured source."""
