"""
Main API router for InterviewDesk

Aggregates all API routes and provides the main application router.
"""

from fastapi import APIRouter

from interviewdesk.api.endpoints import questions, analysis, publish

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    questions.router,
    tags=["Questions"]
)

api_router.include_router(
    analysis.router,
    tags=["Analysis"]
)

api_router.include_router(
    publish.router,
    tags=["Publish"]
)
