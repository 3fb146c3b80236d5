"""Case-insensitive substring filter over message bodies and senders."""

from __future__ import annotations

from ..transcripts import Message
from . import SearchResult, filter_messages


class SubstringBackend:
    """Plain filter. Every hit scores 1.0 and results keep conversation order."""

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._indexed = False

    def index(self, messages: list[Message]) -> None:
        self._messages = list(messages)
        self._indexed = True

    def search(self, query: str, limit: int = 10, sender: str | None = None) -> list[SearchResult]:
        hits = filter_messages(self._messages, query, sender)
        if limit:
            hits = hits[:limit]
        return [SearchResult(message=m, score=1.0, rank=rank) for rank, m in enumerate(hits, start=1)]

    def is_ready(self) -> bool:
        return self._indexed
