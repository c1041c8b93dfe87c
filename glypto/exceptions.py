"""
Custom exceptions for glypto.

Error philosophy:
  - DocumentError → FAIL HARD: the input cannot be queried, nothing is scraped.
  - ProviderError → FAIL HARD at wiring time: an object handed to the
    registry does not look like a provider.
  - ParserError   → FAIL HARD: unknown parser backend requested.

Everything else ("this node is not mine", "this attribute is missing",
"this JSON-LD block is broken") is not an error at all and comes back as
None from the provider or registry call.
"""

from typing import Optional


class GlyptoError(Exception):
    """Base exception for all glypto errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DocumentError(GlyptoError, TypeError):
    """
    Raised by the Scraper when it is handed something that is not a
    queryable document.

    Subclasses TypeError so callers treating it as a plain type error
    keep working.
    """
    pass


class ProviderError(GlyptoError):
    """Raised when an object fails the provider capability check."""

    def __init__(
        self,
        message: str,
        provider: str,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        self.provider = provider  # repr() of the rejected object


class ParserError(GlyptoError):
    """Raised when an unknown HTML parser backend is requested."""

    def __init__(
        self,
        message: str,
        parser: str,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        self.parser = parser
