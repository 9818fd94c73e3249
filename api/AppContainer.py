# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-25
# Description: AppContainer.py
# -----------------------------------------------------------------------------
import settings
from config.Config import Config
from embedding.EmbeddingCache import EmbeddingCache
from embedding.GeoEmbedder import GeoEmbedder
from geometry.MapView import MapView
from health.EmbeddingHealth import EmbeddingHealth
from loader.GeoDatasetLoader import GeoDatasetLoader
from services.GeoExploreController import GeoExploreController
from services.GeoHealthService import GeoHealthService
from services.GeoSearchService import GeoSearchService
from utility.logging_utils import get_logger

logger = get_logger(__name__)


class AppContainer:
    """
    Owns object instantiation and application wiring.
    Singleton instances are provided via FastAPI dependencies.
    """

    def __init__(self) -> None:
        # Configuration
        self.cfg = Config.from_env()
        logger.info("Config: %s", self.cfg.summary())

        # Dataset (loaded once, immutable afterwards)
        self.dataset_loader = GeoDatasetLoader(settings.DATASET_PATH)
        self.dataset = self.dataset_loader.load()

        self.map_view = MapView()

        # Embedding provider is optional; without it search runs term overlap only
        self.embedding_cache = EmbeddingCache()
        self.embedder = None
        self.embedding_health = None
        if self.cfg.embedding_configured():
            self.embedder = GeoEmbedder(cfg=self.cfg, cache=self.embedding_cache)
            self.embedding_health = EmbeddingHealth(self.embedder)
        else:
            logger.info(
                "Embedding provider not configured (missing %s); term-overlap search only",
                self.cfg.missing_embedding_env_vars(),
            )

        # Return a singleton GeoSearchService instance
        self.search_service = GeoSearchService(
            dataset=self.dataset,
            embedder=self.embedder,
        )

        # Return a singleton GeoExploreController instance (current results + cursor)
        self.explore_controller = GeoExploreController(search_service=self.search_service)

        # Return a singleton GeoHealthService instance
        self.health_service = GeoHealthService(
            dataset=self.dataset,
            embedding_health=self.embedding_health,
        )

# Singleton container instance
app_container = AppContainer()
