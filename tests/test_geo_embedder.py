# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-19
# Description: test_geo_embedder.py
# -----------------------------------------------------------------------------
from types import SimpleNamespace

import numpy as np
import pytest

from config.Config import Config
from embedding.EmbeddingCache import EmbeddingCache, content_hash
from embedding.GeoEmbedder import GeoEmbedder
from health.EmbeddingHealth import EmbeddingHealth
from search.errors import EmbeddingProviderError

CFG = Config(
    openai_azure_api_key="test-key",
    openai_azure_endpoint="https://example.openai.azure.com",
    openai_azure_embed_deployment="text-embedding-3-small",
)


class FakeEmbeddings:
    def __init__(self, fail_times: int = 0):
        self.calls = []
        self.fail_times = fail_times

    def create(self, model=None, input=None):
        self.calls.append(list(input))
        if len(self.calls) <= self.fail_times:
            raise RuntimeError("503 Service Unavailable")
        data = [SimpleNamespace(embedding=[float(len(t)), 1.0, 0.0]) for t in input]
        return SimpleNamespace(data=data)


def _embedder(fail_times: int = 0, **kwargs) -> GeoEmbedder:
    client = SimpleNamespace(embeddings=FakeEmbeddings(fail_times=fail_times))
    return GeoEmbedder(CFG, client=client, retry_delay=0.0, **kwargs)


def test_embed_returns_normalized_vector():
    embedder = _embedder()

    vec = embedder.embed("river")

    assert vec.shape == (3,)
    assert np.linalg.norm(vec) == pytest.approx(1.0, rel=1e-5)


def test_embed_texts_uses_cache_and_batches():
    embedder = _embedder(batch_size=2)
    fake = embedder.client.embeddings

    first = embedder.embed_texts(["a", "bb", "ccc", "a"])
    second = embedder.embed_texts(["bb", "ccc"])

    # 3 unique texts in batches of 2; the second call is fully cached
    assert fake.calls == [["a", "bb"], ["ccc"]]
    assert first.shape == (4, 3)
    assert np.allclose(first[0], first[3])
    assert np.allclose(second[0], first[1])


def test_retries_then_raises_provider_error():
    embedder = _embedder(fail_times=10, max_retries=2)

    with pytest.raises(EmbeddingProviderError):
        embedder.embed("river")

    assert len(embedder.client.embeddings.calls) == 2


def test_transient_failure_recovers():
    embedder = _embedder(fail_times=1, max_retries=3)

    assert embedder.embed("river").shape == (3,)
    assert len(embedder.client.embeddings.calls) == 2


def test_embed_records_skips_undescribed(river_dataset):
    embedder = _embedder()

    records = embedder.embed_records(river_dataset)

    assert [r.record_index for r in records] == [0, 1, 2, 3]
    assert records[0].text.startswith("River bank")
    assert records[0].content_hash == content_hash(records[0].text, embedder.model)


def test_content_hash_depends_on_model():
    assert content_hash("river", "m1") != content_hash("river", "m2")
    assert content_hash("river", "m1") == content_hash("river", "m1")


def test_cache_evicts_oldest_entry():
    cache = EmbeddingCache(max_entries=2)
    cache.put("a", np.zeros(2))
    cache.put("b", np.zeros(2))
    cache.put("c", np.zeros(2))

    assert len(cache) == 2
    assert cache.get("a") is None
    assert cache.get("c") is not None


def test_missing_config_fails_fast_without_client():
    with pytest.raises(ValueError):
        GeoEmbedder(Config())


def test_embedding_health_passes_and_fails():
    assert EmbeddingHealth(_embedder()).run() is True
    assert EmbeddingHealth(_embedder(), expected_dim=1536).run() is False
    assert EmbeddingHealth(_embedder(fail_times=10, max_retries=1)).run() is False


@pytest.mark.integration
def test_live_azure_embedding():
    cfg = Config.from_env()
    missing = cfg.missing_embedding_env_vars()
    if missing:
        pytest.skip(f"Missing env vars for Azure OpenAI: {', '.join(missing)}")

    embedder = GeoEmbedder(cfg, max_retries=2)
    vec = embedder.embed("a blue bridge over a river")

    assert vec.ndim == 1 and vec.size > 0
    assert np.linalg.norm(vec) == pytest.approx(1.0, rel=1e-3)
