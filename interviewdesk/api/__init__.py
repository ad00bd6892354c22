"""
API layer for InterviewDesk

Contains FastAPI routers for:
- Question generation and listing
- AI candidate analysis
- Result publication
"""

from interviewdesk.api.router import api_router

__all__ = ["api_router"]
