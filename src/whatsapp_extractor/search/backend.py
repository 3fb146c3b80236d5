"""Search backend protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..transcripts import Message
from . import SearchResult


@runtime_checkable
class SearchBackend(Protocol):
    """Protocol for search backends."""

    def index(self, messages: list[Message]) -> None:
        """Index a list of messages, replacing any previous index."""
        ...

    def search(self, query: str, limit: int = 10, sender: str | None = None) -> list[SearchResult]:
        """Search indexed messages. Returns results sorted by rank."""
        ...

    def is_ready(self) -> bool:
        """Return True if the backend has an index and is ready to search."""
        ...
