"""
Core business logic modules for InterviewDesk

Contains:
- Completion Client: LLM calls with acceptance retry
- Response Extractor: fenced JSON parsing and validation
- Score Aggregator: totals and percentage from free-text scores
- Report Composer: six-variant HTML result reports
- Notification Dispatcher: candidate and interviewer e-mails
- Interview Orchestrator: per-endpoint flows
"""

from interviewdesk.core.completion import CompletionClient, CompletionOptions
from interviewdesk.core.extraction import ResponseExtractor, ResponseShape
from interviewdesk.core.scoring import ScoreAggregator
from interviewdesk.core.report_composer import ReportComposer
from interviewdesk.core.notifications import NotificationDispatcher
from interviewdesk.core.interview_orchestrator import InterviewOrchestrator

__all__ = [
    "CompletionClient",
    "CompletionOptions",
    "ResponseExtractor",
    "ResponseShape",
    "ScoreAggregator",
    "ReportComposer",
    "NotificationDispatcher",
    "InterviewOrchestrator",
]
