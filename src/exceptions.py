"""
Exception taxonomy for the screener.
Decode and shape failures never escape a card; they are caught at the
per-query boundary and turned into that card's error state.
"""
from typing import Optional


class ScreenerError(Exception):
    """Base exception for screener errors."""
    pass


class InvalidResponseShape(ScreenerError):
    """Decoded model output is missing required keys or violates the schema."""

    def __init__(self, message: str, path: Optional[str] = None, reason: Optional[str] = None):
        super().__init__(message)
        self.path = path
        self.reason = reason


class DecodeFailure(InvalidResponseShape):
    """Sanitized model text is not valid JSON."""
    pass


class TransportFault(ScreenerError):
    """The remote model call itself failed (network, quota, auth)."""
    pass


class GeminiConfigError(TransportFault):
    """Raised when the Gemini API key is missing."""
    pass


class AggregateFault(ScreenerError):
    """The sequential global scan failed outside its per-step guards."""
    pass
