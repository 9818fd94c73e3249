# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-19
# Description: EmbeddingCache
# -----------------------------------------------------------------------------
import hashlib
import logging
import threading
from typing import Dict, Optional

import numpy as np

from utility.logging_utils import get_class_logger


def content_hash(text: str, model: str = "") -> str:
    """sha256 over model + text; a model change never reuses old vectors."""
    h = hashlib.sha256()
    h.update(model.encode("utf-8"))
    h.update(b"\x00")
    h.update(text.encode("utf-8"))
    return h.hexdigest()


class EmbeddingCache:
    """
    In-memory vector cache keyed by content hash. Holds vectors only, never
    search results.
    """

    def __init__(self, max_entries: int = 10_000, logger: logging.Logger | None = None) -> None:
        self.max_entries = max_entries
        self.logger = logger or get_class_logger(self.__class__)
        self._vectors: Dict[str, np.ndarray] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._vectors)

    def get(self, key: str) -> Optional[np.ndarray]:
        with self._lock:
            vec = self._vectors.get(key)
            if vec is None:
                self.misses += 1
            else:
                self.hits += 1
            return vec

    def put(self, key: str, vector: np.ndarray) -> None:
        with self._lock:
            if key not in self._vectors and len(self._vectors) >= self.max_entries:
                # dict keeps insertion order: evict the oldest entry
                oldest = next(iter(self._vectors))
                del self._vectors[oldest]
                self.logger.debug("Embedding cache full (%d), evicted %s", self.max_entries, oldest[:12])
            self._vectors[key] = vector
