# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-18
# Updated: 2026-10-03
# Description: GeoEmbedder
# -----------------------------------------------------------------------------
import time
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
from openai import AzureOpenAI, OpenAI

import settings
from config.Config import Config
from embedding.EmbeddingCache import EmbeddingCache, content_hash
from embedding.EmbeddingRecord import EmbeddingRecord
from record.GeoRecord import GeoRecord
from search.errors import EmbeddingProviderError
from utility.logging_utils import get_class_logger


class GeoEmbedder:
    def __init__(
            self,
            cfg: Config,
            *,
            batch_size: int = settings.EMBED_BATCH_SIZE,
            normalize: bool = True,
            max_retries: int = settings.EMBED_MAX_RETRIES,
            retry_delay: float = 0.8,
            cache: Optional[EmbeddingCache] = None,
            client: Any = None,
            logger=None,
    ):
        self.cfg = cfg
        self.batch_size = batch_size
        self.normalize = normalize
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.cache = cache if cache is not None else EmbeddingCache()
        self.logger = logger or get_class_logger(self.__class__)

        self.model = cfg.openai_azure_embed_deployment or "text-embedding-3-large"
        self._use_deployment_param = True
        if client is not None:
            self.client = client
        else:
            cfg.validate_embedding()
            self._init_client()
        self.logger.info("Azure OpenAI embedder initialized '%s' (batch=%d)", self.model, self.batch_size)

    def _init_client(self) -> None:
        """
        Tries classic AzureOpenAI(...) first; if the installed SDK signature
        is incompatible, falls back to OpenAI(base_url=.../deployments/<model>).
        Sets self._use_deployment_param accordingly.
        """
        endpoint = self.cfg.openai_azure_endpoint.rstrip("/")
        key = self.cfg.openai_azure_api_key

        try:
            self.client = AzureOpenAI(
                api_key=key,
                azure_endpoint=endpoint,
                api_version=self.cfg.openai_api_version,
            )
            self._use_deployment_param = True
            return
        except TypeError as e:
            self.logger.debug(f"AzureOpenAI init fell through to base_url mode: {e}")

        # Deployment encoded in base_url; do not pass model= on each call
        self.client = OpenAI(
            api_key=key,
            base_url=f"{endpoint}/openai/deployments/{self.model}",
        )
        self._use_deployment_param = False

    def _embed_batch(self, texts: List[str]) -> np.ndarray:
        delay = self.retry_delay
        for attempt in range(1, self.max_retries + 1):
            try:
                if self._use_deployment_param:
                    resp = self.client.embeddings.create(model=self.model, input=texts)
                else:
                    resp = self.client.embeddings.create(input=texts)

                arr = np.asarray([d.embedding for d in resp.data], dtype=np.float32)
                if arr.ndim != 2 or arr.shape[0] != len(texts):
                    raise EmbeddingProviderError(
                        f"expected {len(texts)} embeddings, got array of shape {arr.shape}"
                    )

                # Normalize vectors (cosine-friendly); zero vectors stay zero
                if self.normalize:
                    norms = np.linalg.norm(arr, axis=1, keepdims=True) + 1e-12
                    arr = arr / norms
                return arr

            except Exception as e:
                self.logger.warning(f"Embedding batch failed (attempt {attempt}/{self.max_retries}): {e}")
                if attempt == self.max_retries:
                    raise EmbeddingProviderError(f"Embedding provider failed after {attempt} attempts: {e}") from e
                time.sleep(delay)
                delay *= 1.7  # backoff

        # Unreachable and include for type checkers
        return np.empty((0, 0), dtype=np.float32)

    def embed_texts(self, texts: Sequence[str]) -> np.ndarray:
        """
        Cache lookup → batch the misses → _embed_batch → stack in input order.
        """
        keys = [content_hash(t, self.model) for t in texts]
        found: Dict[str, np.ndarray] = {}
        missing: List[str] = []
        for key, text in zip(keys, texts):
            if key in found:
                continue
            vec = self.cache.get(key)
            if vec is None:
                if text not in missing:
                    missing.append(text)
            else:
                found[key] = vec

        if missing:
            self.logger.info(f"Embedding {len(missing)} texts (batch={self.batch_size}, cached={len(found)})")
        for i in range(0, len(missing), self.batch_size):
            batch = missing[i:i + self.batch_size]
            arr = self._embed_batch(batch)
            for text, vec in zip(batch, arr):
                key = content_hash(text, self.model)
                self.cache.put(key, vec)
                found[key] = vec

        if not keys:
            return np.empty((0, 0), dtype=np.float32)
        return np.stack([found[k] for k in keys])

    def embed(self, text: str) -> np.ndarray:
        return self.embed_texts([text])[0]

    def embed_records(self, records: Sequence[GeoRecord]) -> List[EmbeddingRecord]:
        """
        Vectors for every described record, keyed by dataset index.
        Records without a description are skipped; they never score.
        """
        items = [r for r in records if r.has_description()]
        out: List[EmbeddingRecord] = []
        if not items:
            return out

        texts = [r.embedding_text() for r in items]
        arr = self.embed_texts(texts)
        for r, text, v in zip(items, texts, arr):
            out.append(EmbeddingRecord(
                record_index=r.index,
                vector=v,
                text=text,
                content_hash=content_hash(text, self.model),
            ))

        self.logger.info(f"Completed embeddings for {len(out)} records.")
        return out
