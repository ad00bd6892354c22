"""
InterviewDesk - AI-Assisted Technical Interview Backend

Generates interview question sets with an LLM, turns interviewer scores
into feedback, and e-mails branded result reports to candidates.
"""

__version__ = "0.1.0"
__author__ = "InterviewDesk Team"
