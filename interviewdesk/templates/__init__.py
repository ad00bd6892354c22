"""
E-mail templates for InterviewDesk
"""

from interviewdesk.templates.report_email import ReportTemplates

__all__ = ["ReportTemplates"]
