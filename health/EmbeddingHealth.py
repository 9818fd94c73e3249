# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-23
# Description: EmbeddingHealth
# -----------------------------------------------------------------------------
import time
import logging
from typing import Optional

import numpy as np

from embedding.EmbeddingProvider import EmbeddingProvider
from utility.logging_utils import get_logger


class EmbeddingHealth:
    """
    Smoke test for the embedding provider.

    Verifies:
      - The embedding call completes successfully
      - The response is a non-zero vector
      - The vector dimension matches the expected dimension (if provided)
    """

    def __init__(
        self,
        embedder: EmbeddingProvider,
        expected_dim: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.embedder = embedder
        self.expected_dim = expected_dim
        self.logger = logger or get_logger(__name__)

    def run(self) -> bool:
        """
        Run the embedding smoke test.

        Returns:
            True if the embedding call succeeds and (optionally) the dimension matches.
        """
        test_text = "a blue bridge over a river"
        self.logger.info("Running embedding healthcheck using model: %s", getattr(self.embedder, "model", None))

        try:
            start = time.time()
            vector = np.asarray(self.embedder.embed(test_text), dtype=np.float32)
            elapsed_ms = (time.time() - start) * 1000.0

            if vector.size == 0 or not np.any(vector):
                self.logger.error("Embedding provider returned an empty or zero vector.")
                return False

            dim = int(vector.size)
            self.logger.info("Embedding call succeeded in %.1f ms. Returned dimension: %d", elapsed_ms, dim)

            # Optional dimension validation
            if self.expected_dim is not None and dim != self.expected_dim:
                self.logger.warning("Dimension mismatch: expected %d, got %d.", self.expected_dim, dim)
                return False

            self.logger.info("Embedding healthcheck PASSED.")
            return True

        except Exception as e:
            self.logger.exception("Embedding healthcheck FAILED: %s", e)
            return False
