# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-17
# Updated: 2026-10-01
# Description: GeoScorer
# -----------------------------------------------------------------------------
from enum import Enum
from typing import Callable, Iterable, List, Mapping, Optional, Sequence

import settings
from record.GeoRecord import GeoRecord, ScoredRecord
from search.errors import EmbeddingProviderError, InvalidQuery
from search.similarity import Vector, cosine_similarity

EmbedFn = Callable[[str], Vector]


class ScoringMode(str, Enum):
    TERM = "term"
    EMBEDDING = "embedding"


def normalize_query(query: Optional[str]) -> str:
    q = (query or "").strip().lower()
    if not q:
        raise InvalidQuery(settings.BLANK_QUERY_PROMPT)
    return q


def query_terms(query: Optional[str]) -> List[str]:
    # str.split() with no separator drops the empty terms of repeated whitespace
    return normalize_query(query).split()


def count_occurrences(text: str, term: str) -> int:
    """
    Occurrences of `term` anywhere in `text`, including inside longer words
    ("river" counts in "riverbank"). Same count as len(text.split(term)) - 1.
    """
    return text.count(term)


def rank(scored: Iterable[ScoredRecord]) -> List[ScoredRecord]:
    """Keep strictly positive relevance; sort descending, ties in dataset order."""
    kept = [s for s in scored if s.relevance > 0]
    return sorted(kept, key=lambda s: (-s.relevance, s.index))


class TermOverlapScorer:
    """Sum of per-term substring counts over the lowercased description."""

    def score(self, query: str, dataset: Sequence[GeoRecord]) -> List[ScoredRecord]:
        terms = query_terms(query)

        scored: List[ScoredRecord] = []
        for record in dataset:
            if not record.has_description():
                continue
            description = record.description.lower()
            relevance = sum(count_occurrences(description, t) for t in terms)
            scored.append(ScoredRecord(record=record, relevance=relevance))

        return rank(scored)


class EmbeddingSimilarityScorer:
    """
    Cosine similarity between the query embedding and each record embedding.
    Records below `threshold` are dropped.
    """

    def __init__(self, embed: EmbedFn, threshold: float = settings.SIMILARITY_THRESHOLD) -> None:
        self.embed = embed
        self.threshold = threshold

    def _embed(self, text: str) -> Vector:
        try:
            return self.embed(text)
        except EmbeddingProviderError:
            raise
        except Exception as e:
            raise EmbeddingProviderError(f"embed() failed: {e}") from e

    def score(
        self,
        query: str,
        dataset: Sequence[GeoRecord],
        record_embeddings: Optional[Mapping[int, Vector]] = None,
    ) -> List[ScoredRecord]:
        q = normalize_query(query)
        query_vector = self._embed(q)
        record_embeddings = record_embeddings or {}

        scored: List[ScoredRecord] = []
        for record in dataset:
            if not record.has_description():
                continue

            vector = record_embeddings.get(record.index)
            if vector is None:
                vector = self._embed(record.embedding_text())

            try:
                similarity = cosine_similarity(query_vector, vector)
            except ValueError as e:
                raise EmbeddingProviderError(str(e)) from e

            if similarity >= self.threshold:
                scored.append(ScoredRecord(record=record, relevance=similarity))

        return rank(scored)


def score(
    query: str,
    dataset: Sequence[GeoRecord],
    *,
    mode: ScoringMode | str = ScoringMode.TERM,
    embed: Optional[EmbedFn] = None,
    record_embeddings: Optional[Mapping[int, Vector]] = None,
    threshold: float = settings.SIMILARITY_THRESHOLD,
) -> List[ScoredRecord]:
    """
    Rank `dataset` against `query`. Pure: no state is kept between calls.

    Raises InvalidQuery for a blank query (before any scoring) and
    EmbeddingProviderError when embedding mode cannot produce vectors.
    """
    mode = ScoringMode(mode)
    if mode is ScoringMode.TERM:
        return TermOverlapScorer().score(query, dataset)

    if embed is None:
        normalize_query(query)
        raise EmbeddingProviderError("embedding mode requested without an embed function")

    return EmbeddingSimilarityScorer(embed, threshold=threshold).score(
        query, dataset, record_embeddings=record_embeddings
    )
