# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-17
# Description: EmbeddingRecord
# -----------------------------------------------------------------------------
from dataclasses import dataclass

import numpy as np

@dataclass
class EmbeddingRecord:
    """Embedding vector + the text it was computed from, keyed by dataset index."""
    record_index: int
    vector: np.ndarray
    text: str
    content_hash: str
