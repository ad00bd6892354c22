import asyncio

import httpx
import pytest

from interviewdesk.core.completion import (
    CompletionClient,
    CompletionOptions,
    OpenAICompatibleProvider,
    default_acceptance,
    word_count_condition,
)
from interviewdesk.core.errors import CompletionError

from tests.conftest import ScriptedProvider

SHORT = "too short"
LONG = "one two three four five six seven eight nine ten eleven"


def run(coro):
    return asyncio.run(coro)


def test_default_acceptance_needs_more_than_ten_words():
    assert not default_acceptance("one two three four five six seven eight nine ten")
    assert default_acceptance(LONG)
    assert not default_acceptance('{"comments": "Good."}')


def test_word_count_condition_splits_on_any_whitespace():
    condition = word_count_condition(2)
    assert condition("a\nb\tc")
    assert not condition("a  b")


def test_accepted_first_response_makes_one_call():
    provider = ScriptedProvider([LONG, SHORT])
    client = CompletionClient(provider)
    options = CompletionOptions(retry_count=3, acceptance_condition=default_acceptance)

    assert run(client.complete([], options)) == LONG
    assert len(provider.calls) == 1


def test_retries_until_accepted():
    provider = ScriptedProvider([SHORT, SHORT, LONG])
    client = CompletionClient(provider)
    options = CompletionOptions(retry_count=3, acceptance_condition=default_acceptance)

    assert run(client.complete([], options)) == LONG
    assert len(provider.calls) == 3


def test_exhausted_budget_returns_last_response():
    provider = ScriptedProvider(["first", "second", "third", "fourth", "fifth"])
    client = CompletionClient(provider)
    options = CompletionOptions(retry_count=3, acceptance_condition=default_acceptance)

    assert run(client.complete([], options)) == "fourth"
    assert len(provider.calls) == 4


def test_no_condition_means_single_call():
    provider = ScriptedProvider([SHORT, LONG])
    client = CompletionClient(provider)

    assert run(client.complete([], CompletionOptions(retry_count=3))) == SHORT
    assert len(provider.calls) == 1


def test_provider_errors_are_not_retried():
    provider = ScriptedProvider([CompletionError("provider down"), LONG])
    client = CompletionClient(provider)
    options = CompletionOptions(retry_count=3, acceptance_condition=default_acceptance)

    with pytest.raises(CompletionError):
        run(client.complete([], options))
    assert len(provider.calls) == 1


def test_negative_retry_count_is_rejected():
    with pytest.raises(ValueError):
        CompletionOptions(retry_count=-1)


def test_openai_compatible_provider_posts_messages():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = request.read()
        return httpx.Response(200, json={"choices": [{"message": {"content": "hello there"}}]})

    provider = OpenAICompatibleProvider(
        base_url="https://llm.example.com/v1/",
        api_key="secret",
        transport=httpx.MockTransport(handler),
    )

    messages = [{"role": "user", "content": "hi"}]
    text = run(provider.generate_completion(messages, CompletionOptions(model="gpt-4")))

    assert text == "hello there"
    assert seen["path"] == "/v1/chat/completions"
    assert seen["auth"] == "Bearer secret"
    assert b'"model":"gpt-4"' in seen["body"].replace(b" ", b"")


def test_openai_compatible_provider_joins_multipart_content():
    def handler(request: httpx.Request) -> httpx.Response:
        content = [{"type": "text", "text": "part one, "}, "part two"]
        return httpx.Response(200, json={"choices": [{"message": {"content": content}}]})

    provider = OpenAICompatibleProvider(
        base_url="https://llm.example.com",
        transport=httpx.MockTransport(handler),
    )

    assert run(provider.generate_completion([], CompletionOptions())) == "part one, part two"


def test_openai_compatible_provider_wraps_http_errors():
    provider = OpenAICompatibleProvider(
        base_url="https://llm.example.com",
        transport=httpx.MockTransport(lambda request: httpx.Response(503)),
    )

    with pytest.raises(CompletionError):
        run(provider.generate_completion([], CompletionOptions()))
