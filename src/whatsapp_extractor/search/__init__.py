"""Pluggable search over parsed chat messages."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..transcripts import Message

ALL_SENDERS = "all"
BACKENDS = ("substring", "bm25")


@dataclass
class SearchResult:
    """A single search hit."""

    message: Message
    score: float
    rank: int


def matches_sender(message: Message, sender: str | None) -> bool:
    return sender is None or sender == ALL_SENDERS or message.sender == sender


def filter_messages(
    messages: Iterable[Message],
    query: str = "",
    sender: str | None = None,
) -> list[Message]:
    """Keep messages whose body or sender contains ``query`` (case-insensitive).

    ``sender`` restricts results to one participant; None or "all" disables it.
    Source order is preserved.
    """
    needle = query.lower()
    return [
        m
        for m in messages
        if (needle in m.message.lower() or needle in m.sender.lower()) and matches_sender(m, sender)
    ]


def get_backend(backend_name: str) -> "backend.SearchBackend":
    """Resolve a backend name to an instance."""
    if backend_name == "substring":
        from .substring import SubstringBackend

        return SubstringBackend()
    elif backend_name == "bm25":
        from .bm25 import BM25Backend

        return BM25Backend()
    else:
        raise ValueError(
            f"Unknown search backend: {backend_name!r}. "
            "Use 'substring' or 'bm25'."
        )
