"""
Score Aggregator for InterviewDesk

Interviewers enter scores as free text ("3", "3 out of 4", "3/4").
Only the integer prefix of the first whitespace-delimited token counts.
A token without an integer prefix yields NaN, which is carried through
the sum and the percentage instead of being rejected.
"""

import logging
import math
import re
from decimal import ROUND_HALF_UP, Decimal

from interviewdesk.core.errors import AlignmentError
from interviewdesk.models.evaluation import MAX_SCORE_PER_QUESTION, AggregateResult

logger = logging.getLogger(__name__)

_INTEGER_PREFIX = re.compile(r"[+-]?[0-9]+")


def parse_score_token(score: str) -> int | float:
    """Integer prefix of the first token, or NaN if there is none."""
    tokens = score.split()
    if not tokens:
        return math.nan

    match = _INTEGER_PREFIX.match(tokens[0])
    return int(match.group()) if match else math.nan


def format_percentage(total: int | float, maximum: int) -> str:
    """Format total/maximum as a percentage with two decimals and '%'."""
    if maximum == 0 or math.isnan(total):
        return "NaN%"

    ratio = Decimal(total / maximum * 100)
    return f"{ratio.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)}%"


class ScoreAggregator:
    """Sums interviewer scores and relates them to the maximum possible."""

    def __init__(self, max_score_per_question: int = MAX_SCORE_PER_QUESTION):
        self.max_score_per_question = max_score_per_question

    def aggregate(
        self,
        questions_asked: list[str],
        scores_respectively: list[str],
    ) -> AggregateResult:
        if len(questions_asked) != len(scores_respectively):
            raise AlignmentError(
                "Questions and scores must have the same length",
                details={
                    "questions": len(questions_asked),
                    "scores": len(scores_respectively),
                },
            )

        total: int | float = 0
        for score in scores_respectively:
            total += parse_score_token(score)

        maximum = len(questions_asked) * self.max_score_per_question
        percentage = format_percentage(total, maximum)

        logger.info(f"Aggregated {len(questions_asked)} scores: {total}/{maximum} ({percentage})")

        return AggregateResult(
            total_score=total,
            max_possible_score=maximum,
            percentage=percentage,
        )
