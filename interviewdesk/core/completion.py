"""
Completion Client for InterviewDesk

Wraps the external LLM behind a small capability interface and applies
the acceptance policy:
- One provider call per attempt
- Sequential retries while the acceptance condition rejects the text
- At most retry_count + 1 calls, returning the last text when none is accepted

The acceptance condition only looks at the word count of the answer.
It is a weak proxy for "well-formed JSON": long but malformed text is
accepted, and short valid text such as {"comments": "Good."} is retried.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol

import httpx

from interviewdesk.core.errors import CompletionError

logger = logging.getLogger(__name__)

Message = dict[str, str]
AcceptanceCondition = Callable[[str], bool]


def word_count_condition(min_words: int) -> AcceptanceCondition:
    """Accept answers with more than `min_words` whitespace-delimited words."""
    def condition(text: str) -> bool:
        return len(text.split()) > min_words
    return condition


default_acceptance = word_count_condition(10)


@dataclass(frozen=True)
class CompletionOptions:
    """Per-call options for the completion client."""

    model: str = "gpt-4"
    retry_count: int = 0
    acceptance_condition: AcceptanceCondition | None = None
    debug: bool = False

    def __post_init__(self):
        if self.retry_count < 0:
            raise ValueError("retry_count must be non-negative")


class CompletionProvider(Protocol):
    """Anything that can turn role-tagged messages into text."""

    async def generate_completion(
        self, messages: list[Message], options: CompletionOptions
    ) -> str:
        ...


class OpenAICompatibleProvider:
    """
    Completion provider for OpenAI-compatible chat completions APIs.

    Works with any gateway exposing `POST <endpoint>` with
    `{"model", "messages"}` and answering `choices[0].message.content`.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        endpoint: str = "/chat/completions",
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"

        self.endpoint = endpoint
        self.client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    def _extract_content(self, result: dict[str, Any]) -> str:
        """Extract text content from API response, handling list/dict formats."""
        content = result.get("choices", [{}])[0].get("message", {}).get("content", "")

        # Handle case where content is a list (multi-part response)
        if isinstance(content, list):
            text_parts = []
            for part in content:
                if isinstance(part, str):
                    text_parts.append(part)
                elif isinstance(part, dict) and "text" in part:
                    text_parts.append(part["text"])
            content = "".join(text_parts)

        return content if isinstance(content, str) else str(content)

    async def generate_completion(
        self, messages: list[Message], options: CompletionOptions
    ) -> str:
        payload = {
            "model": options.model,
            "messages": messages,
        }

        try:
            response = await self.client.post(self.endpoint, json=payload)
            response.raise_for_status()
            result = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"LLM provider error: {e}")
            raise CompletionError(f"LLM provider call failed: {e}") from e

        return self._extract_content(result)


class CompletionClient:
    """
    Issues prompts through a CompletionProvider with bounded acceptance retry.

    Provider failures are not retried here; they propagate to the caller.
    """

    def __init__(self, provider: CompletionProvider):
        self.provider = provider

    async def complete(
        self, messages: list[Message], options: CompletionOptions
    ) -> str:
        """
        Run the prompt and return the first accepted answer.

        Args:
            messages: Role-tagged prompt messages
            options: Model, retry budget, acceptance condition, debug flag

        Returns:
            The first text accepted by the condition, or the last text
            obtained when the retry budget runs out
        """
        condition = options.acceptance_condition
        max_attempts = options.retry_count + 1 if condition else 1

        text = ""
        for attempt in range(max_attempts):
            text = await self.provider.generate_completion(messages, options)

            if options.debug:
                logger.info(f"Completion attempt {attempt + 1}/{max_attempts}: {text!r}")

            if condition is None or condition(text):
                if attempt > 0:
                    logger.info(f"Completion accepted after {attempt} retry attempt(s)")
                return text

            logger.warning(
                f"Completion rejected by acceptance condition "
                f"(attempt {attempt + 1}/{max_attempts}, {len(text.split())} words)"
            )

        logger.warning(f"Retry budget exhausted after {max_attempts} attempts, using last response")
        return text
