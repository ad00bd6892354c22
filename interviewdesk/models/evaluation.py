"""
Evaluation models for InterviewDesk

Defines the score aggregation result and the AI analysis payloads.
"""

from pydantic import BaseModel, ConfigDict, Field


# Fixed maximum a single question can score
MAX_SCORE_PER_QUESTION = 4


class ScoreSubmission(BaseModel):
    """Scores given by the interviewer, index-aligned with the questions."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    questions_asked: list[str]
    scores_respectively: list[str]


class AggregateResult(BaseModel):
    """Totals derived from a ScoreSubmission."""

    # float only when a score token was not numeric (NaN)
    total_score: int | float
    max_possible_score: int
    percentage: str = Field(..., description="Two decimals with a trailing '%'")


class FeedbackComments(BaseModel):
    """Shape the evaluator LLM must answer with."""

    comments: str


class AnalysisRequest(BaseModel):
    """Body of POST /aianalysis."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    candidate_name: str
    candidate_email: str
    candidates_experience: int | float | str
    candidates_skills: list[str] = Field(default_factory=list)
    hiring_for: str
    job_description: str = ""
    questions_asked_to_the_candidate: list[str]
    scores_respectively: list[str]

    def to_submission(self) -> ScoreSubmission:
        return ScoreSubmission(
            questions_asked=self.questions_asked_to_the_candidate,
            scores_respectively=self.scores_respectively,
        )


class AnalysisResponse(BaseModel):
    """Response of POST /aianalysis."""

    comments: str
