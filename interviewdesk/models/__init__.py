"""
Data models and schemas for InterviewDesk

Contains Pydantic models for:
- Generated questions and stored question sets
- Score aggregation and AI analysis
- Publish requests, stored results and rendered reports
- E-mail envelopes and delivery outcomes
"""

from interviewdesk.models.question import (
    QuestionSpec,
    QuestionSet,
    QuestionGenerationRequest,
    QuestionGenerationResponse,
)
from interviewdesk.models.evaluation import (
    MAX_SCORE_PER_QUESTION,
    ScoreSubmission,
    AggregateResult,
    FeedbackComments,
    AnalysisRequest,
    AnalysisResponse,
)
from interviewdesk.models.report import (
    SelectionStatus,
    ContentMode,
    ToneOutcome,
    ReportVariant,
    PublishedQuestion,
    PublishRequest,
    PublishedResult,
    Report,
    PublishResponse,
)
from interviewdesk.models.notification import MailEnvelope, Recipients, DispatchOutcome

__all__ = [
    # Question
    "QuestionSpec",
    "QuestionSet",
    "QuestionGenerationRequest",
    "QuestionGenerationResponse",
    # Evaluation
    "MAX_SCORE_PER_QUESTION",
    "ScoreSubmission",
    "AggregateResult",
    "FeedbackComments",
    "AnalysisRequest",
    "AnalysisResponse",
    # Report
    "SelectionStatus",
    "ContentMode",
    "ToneOutcome",
    "ReportVariant",
    "PublishedQuestion",
    "PublishRequest",
    "PublishedResult",
    "Report",
    "PublishResponse",
    # Notification
    "MailEnvelope",
    "Recipients",
    "DispatchOutcome",
]
