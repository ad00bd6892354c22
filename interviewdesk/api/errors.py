"""
Error responses for the API layer.

Every failure reaches the client as the same opaque body; the cause is
only written to the server log. `/publish` is the exception: it always
answers 200 and reports failure through `success: false`.
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from interviewdesk.core.interview_orchestrator import PUBLISH_FAILURE_MESSAGE
from interviewdesk.models.report import PublishResponse

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = {"error": "Internal Server Error"}

PUBLISH_PATH = "/publish"


def internal_server_error(exc: Exception, context: str) -> JSONResponse:
    """Log the exception and build the generic 500 response."""
    logger.error(f"{context}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content=INTERNAL_SERVER_ERROR)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are reported like any other failure."""
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")

    if request.url.path == PUBLISH_PATH:
        failure = PublishResponse(message=PUBLISH_FAILURE_MESSAGE, success=False)
        return JSONResponse(status_code=200, content=failure.model_dump())

    return JSONResponse(status_code=500, content=INTERNAL_SERVER_ERROR)
