"""Lexical ranking over the fixed knowledge-base corpus."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from portus_agent.config import RetrievalConfig
from portus_agent.data.knowledge_base import DEFAULT_DOCUMENTS, load_documents
from portus_agent.types import Document, RankedDocument

_NON_ALNUM = re.compile(r"[^a-z0-9]")


class DocumentIndex:
    """Deterministic keyword index for a small, static corpus.

    Query text is lowercased and stripped of everything outside ``[a-z0-9]``
    before being split into a token set. Document text is only lowercased and
    split on whitespace, so punctuation stays attached to document tokens
    (``"hours."`` never matches the query token ``hours``). Existing rankings
    depend on that asymmetry.
    """

    def __init__(
        self,
        documents: Iterable[Document] | None = None,
        config: RetrievalConfig | None = None,
    ) -> None:
        self._documents: tuple[Document, ...] = (
            tuple(documents) if documents is not None else DEFAULT_DOCUMENTS
        )
        self._doc_tokens: tuple[list[str], ...] = tuple(
            doc.text.lower().split() for doc in self._documents
        )
        self.config = config or RetrievalConfig()

    @classmethod
    def from_json(cls, path: str | Path, config: RetrievalConfig | None = None) -> "DocumentIndex":
        return cls(load_documents(path), config=config)

    @property
    def documents(self) -> tuple[Document, ...]:
        return self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def rank(self, query: str, k: int | None = None) -> list[RankedDocument]:
        """Score every document against ``query`` and return the best ``k``.

        Scores count document tokens (with repetition) found in the query token
        set. Ordering is by descending score; ties keep corpus order. There is
        no minimum score, so zero-score documents fill the result when nothing
        matches.
        """

        limit = self.config.top_k if k is None else k
        if limit < 1:
            raise ValueError(f"k must be a positive integer, got {limit}")

        query_tokens = tokenize_query(query)
        scored = [
            RankedDocument(
                document=doc,
                score=sum(1 for token in tokens if token in query_tokens),
            )
            for doc, tokens in zip(self._documents, self._doc_tokens, strict=True)
        ]
        ranked = sorted(scored, key=lambda item: item.score, reverse=True)
        return ranked[:limit]

    def retrieve(self, query: str, k: int | None = None) -> list[Document]:
        return [item.document for item in self.rank(query, k)]


def tokenize_query(query: str) -> set[str]:
    return set(_NON_ALNUM.sub(" ", query.lower()).split())
