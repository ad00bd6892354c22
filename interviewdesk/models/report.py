"""
Report models for InterviewDesk

Defines the publish request, the stored result record and the
rendered report with the variant it was rendered from.
"""

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class SelectionStatus(str, Enum):
    """Outcome of the interview as entered by the interviewer."""

    SELECTED = "selected"
    REJECTED = "rejected"
    OTHER = "other"

    @classmethod
    def classify(cls, value: str | None) -> "SelectionStatus":
        """Map any free-form status to one of the three outcomes."""
        if value == cls.SELECTED.value:
            return cls.SELECTED
        if value == cls.REJECTED.value:
            return cls.REJECTED
        return cls.OTHER


class ContentMode(str, Enum):
    """Whether the report lists questions and answers."""

    WITH_ANSWERS = "with_answers"
    WITHOUT_ANSWERS = "without_answers"


class ToneOutcome(str, Enum):
    """Tone of the report greeting and subject."""

    SELECTED = "selected"
    REJECTED = "rejected"
    UNDETERMINED = "undetermined"


class ReportVariant(NamedTuple):
    """One of the six report templates."""

    content_mode: ContentMode
    tone: ToneOutcome


class PublishedQuestion(BaseModel):
    """A question as shown to the candidate in the results table."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    question: str = ""
    answer: str = ""


class PublishRequest(BaseModel):
    """Body of POST /publish."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    user_id: str | None = None
    q_id: str | None = None
    name: str = ""
    email: str
    total_marks: int | float | str | None = None
    marks: int | float | str | None = None
    percentage: int | float | str | None = None
    questions: list[PublishedQuestion] = Field(default_factory=list)
    scores: list[str] = Field(default_factory=list)
    publish_with_answers: bool = Field(default=False, alias="publishWithAnswers")
    include_selection_status: bool = Field(default=False, alias="includeSelectionStatus")
    selection_status: str | None = Field(default=None, alias="selectionStatus")
    company_name: str = Field(default="", alias="companyName")
    role: str = ""
    interviewer_email: str | None = Field(default=None, alias="interviewerEmail")
    receive_results_mail: bool = Field(default=False, alias="receiveResultsMail")


class PublishedResult(BaseModel):
    """Record stored at `users/<u_id>` for every publish call."""

    model_config = ConfigDict(populate_by_name=True)

    u_id: str
    q_id: str | None = None
    username: str = ""
    email: str
    total_marks: int | float | str | None = None
    marks: int | float | str | None = None
    percentage: int | float | str | None = None
    published_with_answers: bool = Field(default=False, alias="publishedWithAnswers")
    include_selection_status: bool = Field(default=False, alias="includeSelectionStatus")
    selection_status: str | None = Field(default=None, alias="selectionStatus")
    company_name: str = Field(default="", alias="companyName")

    @classmethod
    def from_request(cls, u_id: str, request: PublishRequest) -> "PublishedResult":
        return cls(
            u_id=u_id,
            q_id=request.q_id,
            username=request.name,
            email=request.email,
            total_marks=request.total_marks,
            marks=request.marks,
            percentage=request.percentage,
            published_with_answers=request.publish_with_answers,
            include_selection_status=request.include_selection_status,
            selection_status=request.selection_status,
            company_name=request.company_name,
        )


class Report(BaseModel):
    """A rendered HTML e-mail."""

    subject: str
    html_body: str
    variant: ReportVariant | None = None


class PublishResponse(BaseModel):
    """Response of POST /publish."""

    message: str
    success: bool
