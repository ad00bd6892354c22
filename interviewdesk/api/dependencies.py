"""
API Dependencies

Provides dependency injection for API endpoints.
Manages singleton instances of core components, built once from settings.
"""

import logging

from interviewdesk.config.settings import Settings, get_settings
from interviewdesk.core.completion import (
    CompletionClient,
    CompletionOptions,
    OpenAICompatibleProvider,
    word_count_condition,
)
from interviewdesk.core.interview_orchestrator import InterviewOrchestrator
from interviewdesk.core.notifications import NotificationDispatcher, SmtpMailTransport
from interviewdesk.core.report_composer import ReportComposer
from interviewdesk.core.store import DocumentStore, InMemoryDocumentStore, RealtimeDatabaseStore

logger = logging.getLogger(__name__)


# ============================================================================
# SINGLETON INSTANCES
# ============================================================================

_orchestrator: InterviewOrchestrator | None = None
_provider: OpenAICompatibleProvider | None = None
_store: DocumentStore | None = None


def build_completion_options(settings: Settings) -> CompletionOptions:
    """Completion options shared by every LLM call."""
    return CompletionOptions(
        model=settings.llm_model,
        retry_count=settings.completion_retry_times,
        acceptance_condition=word_count_condition(settings.completion_min_words),
        debug=settings.completion_debug,
    )


def build_store(settings: Settings) -> DocumentStore:
    if settings.database_url:
        return RealtimeDatabaseStore(
            database_url=settings.database_url,
            auth_token=settings.database_auth_token,
            timeout=settings.database_timeout_seconds,
        )

    logger.warning("DATABASE_URL not configured, keeping documents in memory")
    return InMemoryDocumentStore()


def get_orchestrator() -> InterviewOrchestrator:
    """
    Get the interview orchestrator singleton.

    Lazily initializes all required components.
    """
    global _orchestrator, _provider, _store

    if _orchestrator is None:
        settings = get_settings()

        _provider = OpenAICompatibleProvider(
            base_url=settings.llm_base_url,
            api_key=settings.llm_api_key,
            endpoint=settings.llm_endpoint,
            timeout=settings.llm_timeout_seconds,
        )
        _store = build_store(settings)

        transport = SmtpMailTransport(
            host=settings.mail_host,
            port=settings.mail_port,
            sender=settings.mail_address,
            password=settings.mail_app_password,
            use_tls=settings.mail_use_tls,
            timeout=settings.mail_timeout_seconds,
        )

        _orchestrator = InterviewOrchestrator(
            completion_client=CompletionClient(_provider),
            completion_options=build_completion_options(settings),
            store=_store,
            dispatcher=NotificationDispatcher(transport),
            report_composer=ReportComposer(escape_html=settings.report_escape_html),
        )

    return _orchestrator


async def cleanup():
    """Cleanup resources on shutdown."""
    global _orchestrator, _provider, _store

    if _provider:
        await _provider.close()
        _provider = None

    if isinstance(_store, RealtimeDatabaseStore):
        await _store.close()
    _store = None

    _orchestrator = None
