"""
Question models for InterviewDesk
"""

from pydantic import BaseModel, ConfigDict, Field


class QuestionSpec(BaseModel):
    """A single generated interview question."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    question: str = Field(..., description="The question text")
    answer: str = Field(..., description="Reference answer for the interviewer")
    weightage: str = Field(..., description="Importance/difficulty label")


class QuestionSet(BaseModel):
    """
    A stored set of generated questions.

    Persisted once at `questions/<q_id>` and never modified afterwards.
    """

    q_id: str
    role: str | None = None
    experience: int | float | str | None = None
    no_of_questions: int | str | None = None
    skills: list[str] = Field(default_factory=list)
    questions: list[QuestionSpec] = Field(default_factory=list)


class QuestionGenerationRequest(BaseModel):
    """Body of POST /chat."""

    content: str = Field(..., description="Free-form instructions for the generator")
    role: str
    questions: int | str | None = Field(
        default=None,
        description="Number of questions requested"
    )
    experience: int | float | str | None = None
    skills: list[str] = Field(default_factory=list)


class QuestionGenerationResponse(BaseModel):
    """Response of POST /chat."""

    response: str = Field(..., description="JSON string of the generated questions")
    q_id: str
