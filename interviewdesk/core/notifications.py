"""
Notification Dispatcher for InterviewDesk

Sends published reports by e-mail:
- The candidate report, always
- The interviewer summary, when one is requested

The two sends run concurrently and are reconciled independently. Only the
candidate delivery is reported back; interviewer failures are logged.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Protocol

from interviewdesk.core.errors import MailDeliveryError
from interviewdesk.models.notification import DispatchOutcome, MailEnvelope, Recipients
from interviewdesk.models.report import Report

logger = logging.getLogger(__name__)


class MailTransport(Protocol):
    """Anything that can deliver an HTML e-mail."""

    async def send_mail(self, envelope: MailEnvelope) -> str:
        ...


class SmtpMailTransport:
    """
    SMTP mail transport with STARTTLS and login.

    smtplib is blocking, so each message is sent from a worker thread.
    """

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        password: str,
        use_tls: bool = True,
        timeout: float = 20.0,
    ):
        self.host = host
        self.port = port
        self.sender = sender
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    def _build_message(self, envelope: MailEnvelope) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = envelope.subject
        msg["From"] = self.sender
        msg["To"] = ", ".join(envelope.to)
        msg.set_content("This message requires an HTML-capable mail client.")
        msg.add_alternative(envelope.html, subtype="html")
        return msg

    def _send(self, msg: EmailMessage) -> str:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            server.login(self.sender, self.password)
            refused = server.send_message(msg)
        if refused:
            raise MailDeliveryError(
                "Recipients refused by mail server",
                details={"refused": list(refused)},
            )
        return f"Accepted for {msg['To']}"

    async def send_mail(self, envelope: MailEnvelope) -> str:
        if not self.host or not self.sender or not self.password:
            raise MailDeliveryError("Mail transport is not configured")

        msg = self._build_message(envelope)
        try:
            response = await asyncio.to_thread(self._send, msg)
        except (smtplib.SMTPException, OSError) as e:
            raise MailDeliveryError(f"SMTP send failed: {e}") from e

        logger.info(f"Email sent: {response}")
        return response


class NotificationDispatcher:
    """Delivers the candidate report and the optional interviewer summary."""

    def __init__(self, transport: MailTransport):
        self.transport = transport

    async def _deliver(self, envelope: MailEnvelope, label: str) -> bool:
        try:
            await self.transport.send_mail(envelope)
        except MailDeliveryError as e:
            logger.error(f"Failed to send email to {label}: {e.message}")
            return False
        except Exception as e:
            logger.error(f"Failed to send email to {label}: {e}", exc_info=True)
            return False

        logger.info(f"Email sent successfully to {label}")
        return True

    async def dispatch(
        self,
        report: Report,
        recipients: Recipients,
        summary: Report | None = None,
    ) -> DispatchOutcome:
        """
        Send the report and, when given, the interviewer summary.

        Args:
            report: Candidate report
            recipients: Candidate addresses and optional interviewer address
            summary: Interviewer summary, sent only with an interviewer address

        Returns:
            DispatchOutcome with independent per-recipient results
        """
        candidate_send = self._deliver(
            MailEnvelope(to=recipients.candidate, subject=report.subject, html=report.html_body),
            "candidate",
        )

        if summary is None or not recipients.interviewer:
            return DispatchOutcome(candidate_delivered=await candidate_send)

        interviewer_send = self._deliver(
            MailEnvelope(to=[recipients.interviewer], subject=summary.subject, html=summary.html_body),
            "interviewer",
        )

        candidate_delivered, interviewer_delivered = await asyncio.gather(
            candidate_send, interviewer_send
        )
        return DispatchOutcome(
            candidate_delivered=candidate_delivered,
            interviewer_delivered=interviewer_delivered,
        )
