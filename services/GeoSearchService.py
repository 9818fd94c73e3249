# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-20
# Description: GeoSearchService.py
# -----------------------------------------------------------------------------
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

import settings
from embedding.EmbeddingProvider import EmbeddingProvider
from geometry.GeoJSONBuilder import feature_collection_bounds, to_feature_collection
from record.GeoRecord import GeoRecord, ScoredRecord
from search.GeoScorer import ScoringMode, normalize_query, score
from search.errors import EmbeddingProviderError
from utility.logging_utils import get_class_logger


@dataclass(frozen=True)
class SearchOutcome:
    query: str
    requested_mode: ScoringMode
    mode_used: ScoringMode
    results: Tuple[ScoredRecord, ...] = ()
    fallback_reason: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.results)

    def feature_collection(self) -> Dict[str, Any]:
        return to_feature_collection(self.results)

    def fit_bounds(self, collection: Optional[Dict[str, Any]] = None) -> Optional[List[List[float]]]:
        """Pass an already built collection to avoid projecting the results twice."""
        if collection is None:
            collection = self.feature_collection()
        return feature_collection_bounds(collection)


@dataclass
class GeoSearchService:
    """
    Search service:
        - validates the query (InvalidQuery propagates)
        - runs the requested scoring mode over the in-memory dataset
        - falls back to term overlap when embeddings are unavailable or fail
    """

    dataset: Sequence[GeoRecord]
    embedder: Optional[EmbeddingProvider] = None
    default_mode: ScoringMode = ScoringMode(settings.SCORING_MODE_DEFAULT)
    threshold: float = settings.SIMILARITY_THRESHOLD
    logger: logging.Logger | None = None

    _record_vectors: Optional[Dict[int, np.ndarray]] = field(default=None, init=False, repr=False)
    _warm_lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)
        self.default_mode = ScoringMode(self.default_mode)
        self.logger.info(
            "GeoSearchService initialised (records=%d default_mode=%s embedder=%s threshold=%.2f)",
            len(self.dataset),
            self.default_mode.value,
            type(self.embedder).__name__ if self.embedder else None,
            self.threshold,
        )

    def warm_up(self) -> Dict[int, np.ndarray]:
        """
        Compute record vectors once. A failure leaves nothing cached so the
        next embedding query retries.
        """
        if self.embedder is None:
            raise EmbeddingProviderError("no embedding provider configured")

        with self._warm_lock:
            if self._record_vectors is None:
                self.logger.info("Computing record embeddings for %d records", len(self.dataset))
                records = self.embedder.embed_records(self.dataset)
                self._record_vectors = {r.record_index: r.vector for r in records}
            return self._record_vectors

    def search(self, query: str, mode: ScoringMode | str | None = None) -> SearchOutcome:
        requested = ScoringMode(mode) if mode else self.default_mode
        q = normalize_query(query)

        self.logger.info("search: query='%s' mode=%s (start)", q[:120], requested.value)

        if requested is ScoringMode.EMBEDDING:
            try:
                vectors = self.warm_up()
                results = score(
                    q,
                    self.dataset,
                    mode=ScoringMode.EMBEDDING,
                    embed=self.embedder.embed,
                    record_embeddings=vectors,
                    threshold=self.threshold,
                )
                outcome = SearchOutcome(
                    query=q,
                    requested_mode=requested,
                    mode_used=ScoringMode.EMBEDDING,
                    results=tuple(results),
                )
                self._log_done(outcome)
                return outcome
            except EmbeddingProviderError as e:
                self.logger.warning("Embedding search failed, falling back to term overlap: %s", e)
                fallback_reason = str(e)
        else:
            fallback_reason = None

        results = score(q, self.dataset, mode=ScoringMode.TERM)
        outcome = SearchOutcome(
            query=q,
            requested_mode=requested,
            mode_used=ScoringMode.TERM,
            results=tuple(results),
            fallback_reason=fallback_reason,
        )
        self._log_done(outcome)
        return outcome

    def _log_done(self, outcome: SearchOutcome) -> None:
        self.logger.info(
            "search: query='%s' mode_used=%s results=%d (done)",
            outcome.query[:120],
            outcome.mode_used.value,
            outcome.count,
        )
