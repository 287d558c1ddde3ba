class SinkError(Exception):
    """Base exception for all result sink errors."""


class SinkWriteError(SinkError):
    """Raised when results cannot be written to the configured sink."""
