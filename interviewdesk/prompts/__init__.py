"""
AI prompt templates for InterviewDesk

Contains structured prompts for:
- Question set generation
- Candidate evaluation
"""

from interviewdesk.prompts.interviewer import InterviewerPrompts
from interviewdesk.prompts.evaluator import EvaluatorPrompts

__all__ = [
    "InterviewerPrompts",
    "EvaluatorPrompts",
]
