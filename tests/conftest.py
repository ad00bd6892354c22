"""
Shared fixtures: scripted LLM provider, recording mail transport and
an orchestrator wired to an in-memory document store.
"""

import json

import pytest
from fastapi.testclient import TestClient

from interviewdesk.api.dependencies import get_orchestrator
from interviewdesk.core.completion import CompletionClient, CompletionOptions, default_acceptance
from interviewdesk.core.errors import MailDeliveryError
from interviewdesk.core.interview_orchestrator import InterviewOrchestrator
from interviewdesk.core.notifications import NotificationDispatcher
from interviewdesk.core.report_composer import ReportComposer
from interviewdesk.core.store import InMemoryDocumentStore
from interviewdesk.models.notification import MailEnvelope


QUESTIONS = [
    {"question": "What is a closure?", "answer": "A function with its enclosing scope.", "weightage": "2"},
    {"question": "Explain the GIL.", "answer": "A lock allowing one thread to run bytecode.", "weightage": "3"},
]


class ScriptedProvider:
    """Returns canned responses in order; exceptions in the script are raised."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    async def generate_completion(self, messages, options):
        self.calls.append(messages)
        response = self.responses[min(len(self.calls), len(self.responses)) - 1]
        if isinstance(response, Exception):
            raise response
        return response


class RecordingTransport:
    """Records envelopes; addresses in `failing` raise MailDeliveryError."""

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.sent: list[MailEnvelope] = []

    async def send_mail(self, envelope):
        if self.failing.intersection(envelope.to):
            raise MailDeliveryError(f"Mailbox unavailable: {envelope.to}")
        self.sent.append(envelope)
        return "250 OK"


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def provider():
    return ScriptedProvider([json.dumps(QUESTIONS)])


@pytest.fixture
def orchestrator(provider, store, transport):
    return InterviewOrchestrator(
        completion_client=CompletionClient(provider),
        completion_options=CompletionOptions(
            model="gpt-4",
            retry_count=3,
            acceptance_condition=default_acceptance,
        ),
        store=store,
        dispatcher=NotificationDispatcher(transport),
        report_composer=ReportComposer(escape_html=True),
    )


@pytest.fixture
def client(orchestrator):
    from main import app

    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    yield TestClient(app)
    app.dependency_overrides.clear()
