"""
Document Store for InterviewDesk

Key-value document storage addressed by slash-separated paths such as
`questions/<q_id>` and `users/<u_id>`. Reading a parent path returns its
children as a mapping of key to document.

Bindings:
- RealtimeDatabaseStore: Firebase Realtime Database REST API
- InMemoryDocumentStore: process-local storage for development and tests
"""

import copy
import logging
from typing import Any, Protocol

import httpx

from interviewdesk.core.errors import StoreError

logger = logging.getLogger(__name__)


def _segments(path: str) -> list[str]:
    parts = [part for part in path.strip("/").split("/") if part]
    if not parts:
        raise StoreError("Document path must not be empty")
    return parts


class DocumentStore(Protocol):
    """Anything that can store JSON documents by path."""

    async def set(self, path: str, value: Any) -> None:
        ...

    async def get(self, path: str) -> Any | None:
        ...


class InMemoryDocumentStore:
    """Nested-dict document store living in the current process."""

    def __init__(self):
        self._root: dict[str, Any] = {}

    async def set(self, path: str, value: Any) -> None:
        *parents, key = _segments(path)
        node = self._root
        for part in parents:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[key] = copy.deepcopy(value)

    async def get(self, path: str) -> Any | None:
        node: Any = self._root
        for part in _segments(path):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return copy.deepcopy(node)


class RealtimeDatabaseStore:
    """
    Firebase Realtime Database over its REST API.

    Every path maps to `<database_url>/<path>.json`; an auth token, when
    configured, is passed as the `auth` query parameter.
    """

    def __init__(
        self,
        database_url: str,
        auth_token: str = "",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.params = {"auth": auth_token} if auth_token else {}
        self.client = httpx.AsyncClient(
            base_url=database_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    def _url(self, path: str) -> str:
        return "/" + "/".join(_segments(path)) + ".json"

    async def set(self, path: str, value: Any) -> None:
        try:
            response = await self.client.put(self._url(path), json=value, params=self.params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Realtime Database write failed for {path}: {e}")
            raise StoreError(f"Could not write {path}: {e}") from e

    async def get(self, path: str) -> Any | None:
        try:
            response = await self.client.get(self._url(path), params=self.params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            logger.error(f"Realtime Database read failed for {path}: {e}")
            raise StoreError(f"Could not read {path}: {e}") from e
        except ValueError as e:
            raise StoreError(f"Invalid JSON stored at {path}: {e}") from e
