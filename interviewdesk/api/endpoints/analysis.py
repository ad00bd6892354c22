"""
Analysis API endpoints

Handles AI feedback on a candidate's scored interview.
"""

import logging

from fastapi import APIRouter, Depends

from interviewdesk.api.dependencies import get_orchestrator
from interviewdesk.api.errors import internal_server_error
from interviewdesk.core.interview_orchestrator import InterviewOrchestrator
from interviewdesk.models.evaluation import AnalysisRequest, AnalysisResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/aianalysis", response_model=AnalysisResponse)
async def analyse_candidate(
    request: AnalysisRequest,
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
):
    """
    Aggregate the interviewer's scores and return LLM feedback.

    Scores are free text; only the leading integer of each counts.
    """
    try:
        comments = await orchestrator.analyse_candidate(request)
    except Exception as e:
        return internal_server_error(e, "Candidate analysis failed")

    return AnalysisResponse(comments=comments)
