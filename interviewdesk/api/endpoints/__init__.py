"""
API endpoint modules for InterviewDesk
"""

from interviewdesk.api.endpoints import questions, analysis, publish

__all__ = ["questions", "analysis", "publish"]
