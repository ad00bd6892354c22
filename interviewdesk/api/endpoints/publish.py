"""
Publish API endpoints

Records a candidate's result and e-mails the report. Always answers
200; the `success` flag tells whether the candidate e-mail went out.
"""

import logging

from fastapi import APIRouter, Depends

from interviewdesk.api.dependencies import get_orchestrator
from interviewdesk.core.errors import AlignmentError
from interviewdesk.core.interview_orchestrator import InterviewOrchestrator
from interviewdesk.models.report import PublishRequest, PublishResponse

logger = logging.getLogger(__name__)

router = APIRouter()

ALIGNMENT_ERROR_MESSAGE = "Error publishing results, every question needs exactly one score."
UNEXPECTED_ERROR_MESSAGE = "Error publishing results."


@router.post("/publish", response_model=PublishResponse)
async def publish_results(
    request: PublishRequest,
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
) -> PublishResponse:
    """Publish interview results to the candidate and, optionally, the interviewer."""
    try:
        return await orchestrator.publish_results(request)
    except AlignmentError as e:
        logger.warning(f"Rejected publish request for {request.email}: {e.message} {e.details}")
        return PublishResponse(message=ALIGNMENT_ERROR_MESSAGE, success=False)
    except Exception as e:
        logger.error(f"Publishing results failed: {e}", exc_info=True)
        return PublishResponse(message=UNEXPECTED_ERROR_MESSAGE, success=False)
