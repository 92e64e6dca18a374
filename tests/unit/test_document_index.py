import json

import pytest

from portus_agent.config import RetrievalConfig
from portus_agent.retrieval.index import DocumentIndex, tokenize_query
from portus_agent.types import Document

_CORPUS = [
    Document(id="A", title="Alpha", text="alpha beta"),
    Document(id="B", title="Gamma", text="gamma gamma gamma"),
    Document(id="C", title="Mixed", text="beta gamma."),
]


def test_query_tokenization_strips_punctuation() -> None:
    assert tokenize_query("Gamma, BETA! beta?  v101") == {"gamma", "beta", "v101"}
    assert tokenize_query("") == set()


def test_rank_counts_repeated_document_tokens() -> None:
    index = DocumentIndex(_CORPUS)

    ranked = index.rank("gamma, beta!", k=3)

    assert [(item.document.id, item.score) for item in ranked] == [("B", 3), ("A", 1), ("C", 1)]


def test_document_tokens_keep_punctuation() -> None:
    index = DocumentIndex(_CORPUS)

    scores = {item.document.id: item.score for item in index.rank("gamma", k=3)}

    # "gamma." in document C does not match the query token "gamma".
    assert scores["C"] == 0


def test_empty_query_returns_corpus_order() -> None:
    index = DocumentIndex(_CORPUS)

    ranked = index.rank("", k=2)

    assert [item.document.id for item in ranked] == ["A", "B"]
    assert all(item.score == 0 for item in ranked)


def test_retrieve_respects_k_and_is_idempotent() -> None:
    index = DocumentIndex()

    first = index.retrieve("hazardous cargo spill", 3)
    second = index.retrieve("hazardous cargo spill", 3)

    assert len(first) == 3
    assert first == second
    assert [doc.id for doc in first] == ["CUSTOMS-CLEAR-15", "BERTHING-ALGO-02", "OPS-HAZMAT-11B"]
    assert len(index.retrieve("anything", 50)) == len(index)


def test_scores_are_non_increasing() -> None:
    index = DocumentIndex()

    ranked = index.rank("crane wind storm vessels berth", k=len(index))
    scores = [item.score for item in ranked]

    assert scores == sorted(scores, reverse=True)


def test_default_k_comes_from_config() -> None:
    index = DocumentIndex(_CORPUS, config=RetrievalConfig(top_k=1))

    assert [doc.id for doc in index.retrieve("beta")] == ["A"]


def test_non_positive_k_rejected() -> None:
    with pytest.raises(ValueError):
        DocumentIndex(_CORPUS).retrieve("beta", 0)


def test_corpus_loads_from_json(tmp_path) -> None:
    path = tmp_path / "corpus.json"
    path.write_text(
        json.dumps(
            [
                {"id": "D1", "title": "Tides", "text": "tidal windows restrict berthing"},
                {"id": "D2", "title": "Cranes", "text": "crane maintenance schedule"},
            ]
        ),
        encoding="utf-8",
    )

    index = DocumentIndex.from_json(path)

    assert len(index) == 2
    assert index.retrieve("crane", 1)[0].id == "D2"


@pytest.mark.parametrize(
    "payload",
    [
        {"id": "D1"},
        [{"id": "D1", "title": "Missing text"}],
        [{"id": "D1", "title": "a", "text": "x"}, {"id": "D1", "title": "b", "text": "y"}],
        ["not-an-object"],
    ],
)
def test_malformed_corpus_rejected(tmp_path, payload) -> None:
    path = tmp_path / "corpus.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(ValueError):
        DocumentIndex.from_json(path)
