# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-20
# Description: test_search_service.py
# -----------------------------------------------------------------------------
import numpy as np
import pytest

from embedding.EmbeddingRecord import EmbeddingRecord
from search.GeoScorer import ScoringMode
from search.errors import EmbeddingProviderError, InvalidQuery
from services.GeoSearchService import GeoSearchService

VOCAB = ["bridge", "river", "blue", "red", "house"]


class FakeEmbedder:
    model = "fake-bow"

    def __init__(self, fail_records: int = 0, fail_query: bool = False):
        self.fail_records = fail_records
        self.fail_query = fail_query
        self.record_calls = 0

    def embed(self, text):
        if self.fail_query:
            raise EmbeddingProviderError("query embedding timed out")
        words = text.lower().split()
        return np.array([float(words.count(w)) for w in VOCAB])

    def embed_texts(self, texts):
        return np.stack([self.embed(t) for t in texts])

    def embed_records(self, records):
        self.record_calls += 1
        if self.record_calls <= self.fail_records:
            raise EmbeddingProviderError("provider unavailable")
        return [
            EmbeddingRecord(record_index=r.index, vector=self.embed(r.embedding_text()), text=r.embedding_text(), content_hash="")
            for r in records if r.has_description()
        ]


def test_term_search(two_record_dataset):
    svc = GeoSearchService(dataset=two_record_dataset, default_mode=ScoringMode.TERM)

    outcome = svc.search("Bridge River")

    assert outcome.query == "bridge river"
    assert outcome.mode_used is ScoringMode.TERM
    assert outcome.fallback_reason is None
    assert [r.relevance for r in outcome.results] == [2]
    assert outcome.feature_collection()["features"][0]["properties"]["score"] == 2
    assert outcome.fit_bounds() == [[0, 0], [1, 1]]


def test_blank_query_propagates(two_record_dataset):
    with pytest.raises(InvalidQuery):
        GeoSearchService(dataset=two_record_dataset).search("   ")


def test_embedding_search(two_record_dataset):
    svc = GeoSearchService(dataset=two_record_dataset, embedder=FakeEmbedder())

    outcome = svc.search("bridge river", mode="embedding")

    assert outcome.mode_used is ScoringMode.EMBEDDING
    assert [r.index for r in outcome.results] == [0]
    assert 0 < outcome.results[0].relevance <= 1


def test_record_vectors_computed_once(two_record_dataset):
    embedder = FakeEmbedder()
    svc = GeoSearchService(dataset=two_record_dataset, embedder=embedder)

    svc.search("bridge", mode="embedding")
    svc.search("river", mode="embedding")

    assert embedder.record_calls == 1


def test_embedding_mode_without_provider_falls_back(two_record_dataset):
    svc = GeoSearchService(dataset=two_record_dataset)

    outcome = svc.search("bridge river", mode=ScoringMode.EMBEDDING)

    assert outcome.requested_mode is ScoringMode.EMBEDDING
    assert outcome.mode_used is ScoringMode.TERM
    assert outcome.fallback_reason
    assert [r.relevance for r in outcome.results] == [2]


def test_provider_failure_falls_back_and_retries_warm_up(two_record_dataset):
    embedder = FakeEmbedder(fail_records=1)
    svc = GeoSearchService(dataset=two_record_dataset, embedder=embedder)

    first = svc.search("bridge river", mode="embedding")
    second = svc.search("bridge river", mode="embedding")

    assert first.mode_used is ScoringMode.TERM
    assert "provider unavailable" in first.fallback_reason
    assert second.mode_used is ScoringMode.EMBEDDING
    assert embedder.record_calls == 2


def test_query_embedding_failure_falls_back(two_record_dataset):
    svc = GeoSearchService(dataset=two_record_dataset, embedder=FakeEmbedder(fail_query=True))

    outcome = svc.search("bridge river", mode="embedding")

    assert outcome.mode_used is ScoringMode.TERM
    assert outcome.count == 1


def test_default_mode_applies(two_record_dataset):
    svc = GeoSearchService(dataset=two_record_dataset, embedder=FakeEmbedder(), default_mode="embedding")
    assert svc.search("bridge").mode_used is ScoringMode.EMBEDDING
