# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-17
# Description: EmbeddingProvider
# -----------------------------------------------------------------------------

from typing import Protocol, Sequence, runtime_checkable

import numpy as np


@runtime_checkable
class EmbeddingProvider(Protocol):
    model: str

    def embed(self, text: str) -> np.ndarray:
        ...

    def embed_texts(self, texts: Sequence[str]) -> np.ndarray:
        ...
