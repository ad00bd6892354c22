"""
Notification models for InterviewDesk
"""

from pydantic import BaseModel, Field


class MailEnvelope(BaseModel):
    """Everything the mail transport needs to send one HTML message."""

    to: list[str]
    subject: str
    html: str


class Recipients(BaseModel):
    """Addresses a published report goes to."""

    candidate: list[str] = Field(..., min_length=1)
    interviewer: str | None = None


class DispatchOutcome(BaseModel):
    """Per-recipient delivery result of one publish call."""

    candidate_delivered: bool
    # None when no interviewer summary was requested
    interviewer_delivered: bool | None = None
