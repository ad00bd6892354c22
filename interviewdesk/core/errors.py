"""
Custom exceptions for InterviewDesk.

Every failure the core raises on purpose derives from InterviewDeskError,
so the API layer can log the specific cause while returning the same
opaque error body to the caller.
"""

from typing import Any


class InterviewDeskError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class CompletionError(InterviewDeskError):
    """Raised when the LLM provider call itself fails."""
    pass


class MalformedResponse(InterviewDeskError):
    """Raised when LLM output is not valid JSON of the expected shape."""

    def __init__(self, message: str, raw_text: str, details: dict[str, Any] | None = None):
        super().__init__(message, details)
        self.raw_text = raw_text


class AlignmentError(InterviewDeskError):
    """Raised when index-aligned sequences differ in length."""
    pass


class StoreError(InterviewDeskError):
    """Raised when the document store cannot be read or written."""
    pass


class MailDeliveryError(InterviewDeskError):
    """Raised when an e-mail could not be handed to the mail server."""
    pass
