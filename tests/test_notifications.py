import asyncio

import pytest

from interviewdesk.core.errors import MailDeliveryError
from interviewdesk.core.notifications import NotificationDispatcher, SmtpMailTransport
from interviewdesk.models.notification import MailEnvelope, Recipients
from interviewdesk.models.report import Report

from tests.conftest import RecordingTransport

REPORT = Report(subject="Interview Update for Backend Engineer", html_body="<p>candidate</p>")
SUMMARY = Report(subject="Interview Results", html_body="<p>interviewer</p>")


def dispatch(transport, recipients, summary=None):
    dispatcher = NotificationDispatcher(transport)
    return asyncio.run(dispatcher.dispatch(REPORT, recipients, summary=summary))


def test_candidate_only():
    transport = RecordingTransport()

    outcome = dispatch(transport, Recipients(candidate=["ada@example.com"]))

    assert outcome.candidate_delivered is True
    assert outcome.interviewer_delivered is None
    assert transport.sent == [
        MailEnvelope(to=["ada@example.com"], subject=REPORT.subject, html=REPORT.html_body)
    ]


def test_candidate_and_interviewer():
    transport = RecordingTransport()

    outcome = dispatch(
        transport,
        Recipients(candidate=["ada@example.com"], interviewer="lead@acme.io"),
        summary=SUMMARY,
    )

    assert outcome.candidate_delivered is True
    assert outcome.interviewer_delivered is True
    assert {envelope.subject for envelope in transport.sent} == {REPORT.subject, SUMMARY.subject}


def test_summary_without_interviewer_address_is_not_sent():
    transport = RecordingTransport()

    outcome = dispatch(transport, Recipients(candidate=["ada@example.com"]), summary=SUMMARY)

    assert outcome.interviewer_delivered is None
    assert len(transport.sent) == 1


def test_interviewer_failure_does_not_affect_candidate():
    transport = RecordingTransport(failing=["lead@acme.io"])

    outcome = dispatch(
        transport,
        Recipients(candidate=["ada@example.com"], interviewer="lead@acme.io"),
        summary=SUMMARY,
    )

    assert outcome.candidate_delivered is True
    assert outcome.interviewer_delivered is False


def test_candidate_failure_still_sends_interviewer_summary():
    transport = RecordingTransport(failing=["ada@example.com"])

    outcome = dispatch(
        transport,
        Recipients(candidate=["ada@example.com"], interviewer="lead@acme.io"),
        summary=SUMMARY,
    )

    assert outcome.candidate_delivered is False
    assert outcome.interviewer_delivered is True
    assert [envelope.to for envelope in transport.sent] == [["lead@acme.io"]]


def test_unconfigured_smtp_transport_raises():
    transport = SmtpMailTransport(host="smtp.gmail.com", port=587, sender="", password="")
    envelope = MailEnvelope(to=["ada@example.com"], subject="s", html="<p>h</p>")

    with pytest.raises(MailDeliveryError):
        asyncio.run(transport.send_mail(envelope))


def test_smtp_message_is_html():
    transport = SmtpMailTransport(host="smtp.gmail.com", port=587, sender="hr@acme.io", password="pw")
    envelope = MailEnvelope(to=["ada@example.com", "ada@work.io"], subject="Results", html="<p>hi</p>")

    msg = transport._build_message(envelope)

    assert msg["From"] == "hr@acme.io"
    assert msg["To"] == "ada@example.com, ada@work.io"
    assert msg["Subject"] == "Results"
    assert msg.get_body(preferencelist=("html",)).get_content().strip() == "<p>hi</p>"
