"""BM25 ranking over message bodies using rank-bm25."""

from __future__ import annotations

import re

from ..transcripts import Message
from . import SearchResult, matches_sender

_STOPWORDS = frozenset({
    "the", "a", "an", "is", "are", "was", "were", "in", "on", "at",
    "to", "for", "of", "and", "or", "but", "not", "with", "by", "from",
})


def _tokenize(text: str) -> list[str]:
    """Lowercase, strip punctuation/emoji, remove stopwords."""
    text = text.lower()
    text = re.sub(r"[^\w\s]", " ", text)
    return [w for w in text.split() if w and w not in _STOPWORDS]


class BM25Backend:
    """Ranks messages by BM25 relevance. The index lives only in memory."""

    def __init__(self) -> None:
        self._bm25 = None
        self._messages: list[Message] = []

    def index(self, messages: list[Message]) -> None:
        from rank_bm25 import BM25Okapi

        self._messages = list(messages)
        tokenized_corpus = [_tokenize(m.message) for m in self._messages]
        if any(tokenized_corpus):
            self._bm25 = BM25Okapi(tokenized_corpus)
        else:
            self._bm25 = None

    def search(self, query: str, limit: int = 10, sender: str | None = None) -> list[SearchResult]:
        if not self.is_ready():
            return []

        tokenized_query = _tokenize(query)
        if not tokenized_query:
            return []

        scores = self._bm25.get_scores(tokenized_query)

        # sorted() is stable, so equal scores keep conversation order
        scored = sorted(
            (
                (float(score), m)
                for score, m in zip(scores, self._messages)
                if score > 0 and matches_sender(m, sender)
            ),
            key=lambda x: x[0],
            reverse=True,
        )
        if limit:
            scored = scored[:limit]

        return [
            SearchResult(message=m, score=score, rank=rank)
            for rank, (score, m) in enumerate(scored, start=1)
        ]

    def is_ready(self) -> bool:
        return self._bm25 is not None and len(self._messages) > 0
