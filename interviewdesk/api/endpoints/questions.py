"""
Question API endpoints

Handles:
- Question set generation
- Listing stored question sets
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from interviewdesk.api.dependencies import get_orchestrator
from interviewdesk.api.errors import internal_server_error
from interviewdesk.core.interview_orchestrator import InterviewOrchestrator
from interviewdesk.models.question import QuestionGenerationRequest, QuestionGenerationResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/chat", response_model=QuestionGenerationResponse)
async def generate_questions(
    request: QuestionGenerationRequest,
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
):
    """
    Generate a question set for a role and store it.

    Returns the questions as a JSON string along with their identifier.
    """
    try:
        questions, q_id = await orchestrator.generate_question_set(request)
    except Exception as e:
        return internal_server_error(e, "Question generation failed")

    return QuestionGenerationResponse(
        response=orchestrator.serialize_questions(questions),
        q_id=q_id,
    )


@router.get("/resources")
async def list_resources(
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
):
    """Get every stored question set."""
    try:
        question_sets = await orchestrator.list_question_sets()
    except Exception as e:
        return internal_server_error(e, "Listing question sets failed")

    return JSONResponse(content=question_sets)
