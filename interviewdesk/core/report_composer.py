"""
Report Composer for InterviewDesk

Maps a publish request to exactly one of six candidate report variants:

    (with answers | without answers) x (selected | rejected | undetermined)

and renders it, plus the fixed interviewer summary. Composition is a pure
function of the request.

Values are HTML-escaped before interpolation unless escaping is turned off,
in which case they are inserted as raw text exactly like the legacy mails.
"""

import html
import logging
from typing import Any

from interviewdesk.core.errors import AlignmentError
from interviewdesk.models.report import (
    ContentMode,
    PublishRequest,
    Report,
    ReportVariant,
    SelectionStatus,
    ToneOutcome,
)
from interviewdesk.templates.report_email import ReportTemplates

logger = logging.getLogger(__name__)


class ReportComposer:
    """
    Selects and renders the candidate report for a publish request.

    Decision order:
    1. Tone from (include selection status, selection status)
    2. Content mode from publish-with-answers
    3. Interpolation of candidate, company and score values
    """

    SUMMARY_SUBJECT = "Interview Results"

    def __init__(self, escape_html: bool = True, templates: ReportTemplates | None = None):
        """
        Initialize report composer.

        Args:
            escape_html: Escape interpolated values (raw text when False)
            templates: HTML templates to render with
        """
        self.escape_html = escape_html
        self.templates = templates or ReportTemplates()

    # =========================================================================
    # VARIANT SELECTION
    # =========================================================================

    @staticmethod
    def select_tone(request: PublishRequest) -> ToneOutcome:
        """Tone outcome; the status is ignored unless it was asked to be included."""
        if not request.include_selection_status:
            return ToneOutcome.UNDETERMINED

        status = SelectionStatus.classify(request.selection_status)
        if status is SelectionStatus.SELECTED:
            return ToneOutcome.SELECTED
        elif status is SelectionStatus.REJECTED:
            return ToneOutcome.REJECTED
        else:
            return ToneOutcome.UNDETERMINED

    @staticmethod
    def select_content_mode(request: PublishRequest) -> ContentMode:
        if request.publish_with_answers:
            return ContentMode.WITH_ANSWERS
        return ContentMode.WITHOUT_ANSWERS

    def select_variant(self, request: PublishRequest) -> ReportVariant:
        return ReportVariant(
            content_mode=self.select_content_mode(request),
            tone=self.select_tone(request),
        )

    # =========================================================================
    # RENDERING
    # =========================================================================

    def _text(self, value: Any) -> str:
        """Render a request value the way it reads in the JSON body."""
        if value is None:
            text = ""
        elif isinstance(value, float) and value.is_integer():
            text = str(int(value))
        else:
            text = str(value)

        return html.escape(text) if self.escape_html else text

    def _tone(self, tone: ToneOutcome, role: str, company: str) -> tuple[str, str, str]:
        """(subject, header, supplemental clause) for a tone outcome."""
        if tone is ToneOutcome.SELECTED:
            return (
                f"Interview Results for {role}",
                "Congratulations!!",
                self.templates.selected_clause(company),
            )
        elif tone is ToneOutcome.REJECTED:
            return (
                f"Interview Results for {role}",
                "Interview Update",
                self.templates.rejected_clause(company),
            )
        else:
            return f"Interview Update for {role}", "Interview Results", ""

    def _table_rows(self, request: PublishRequest) -> list[tuple[str, str, str]]:
        if len(request.questions) != len(request.scores):
            raise AlignmentError(
                "Questions and scores must have the same length",
                details={
                    "questions": len(request.questions),
                    "scores": len(request.scores),
                },
            )

        return [
            (self._text(item.question), self._text(item.answer), self._text(score))
            for item, score in zip(request.questions, request.scores)
        ]

    def compose(self, request: PublishRequest) -> Report:
        """
        Render the candidate report.

        Args:
            request: Publish request

        Returns:
            Report with subject, HTML body and the selected variant

        Raises:
            AlignmentError: With-answers mode and questions/scores differ in length
        """
        variant = self.select_variant(request)

        company = self._text(request.company_name)
        # Subjects are plain text headers, never escaped
        subject, header, clause = self._tone(variant.tone, request.role, company)

        values = {
            "header": header,
            "name": self._text(request.name),
            "clause": clause,
            "marks": self._text(request.marks),
            "total_marks": self._text(request.total_marks),
            "percentage": self._text(request.percentage),
            "company": company,
        }

        if variant.content_mode is ContentMode.WITH_ANSWERS:
            body = self.templates.table_report(rows=self._table_rows(request), **values)
        else:
            body = self.templates.narrative_report(**values)

        logger.info(f"Composed {variant.content_mode.value}/{variant.tone.value} report for {request.email}")

        return Report(subject=subject, html_body=body, variant=variant)

    def compose_interviewer_summary(self, request: PublishRequest) -> Report:
        """Render the summary sent to the interviewer."""
        body = self.templates.interviewer_summary(
            interviewer=self._text(request.interviewer_email),
            name=self._text(request.name),
            email=self._text(request.email),
            marks=self._text(request.marks),
            total_marks=self._text(request.total_marks),
            percentage=self._text(request.percentage),
        )
        return Report(subject=self.SUMMARY_SUBJECT, html_body=body)
