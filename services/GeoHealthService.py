# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-23
# Description: GeoHealthService.py
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from api.schemas.health import DeepHealthResponse, SmokeTestSummary
from geometry.GeoJSONBuilder import to_feature_collection
from health.EmbeddingHealth import EmbeddingHealth
from loader.GeoDatasetLoader import GeoDatasetLoader
from record.GeoRecord import GeoRecord, ScoredRecord
from utility.logging_utils import get_class_logger


@dataclass
class GeoHealthService:
    """
    Runs smoke checks over the loaded dataset and, when configured, the
    embedding provider. Returns DeepHealthResponse for the API layer.
    """

    dataset: Sequence[GeoRecord]
    embedding_health: Optional[EmbeddingHealth] = None
    logger: logging.Logger | None = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    def run_all(self, run_embedding: bool = True) -> Dict[str, bool]:
        results: Dict[str, bool] = {}

        stats = GeoDatasetLoader.describe(self.dataset)
        results["dataset_loaded"] = stats["records"] > 0
        results["dataset_described"] = stats["described"] > 0

        # Every record with a valid bbox must project to a feature
        try:
            fc = to_feature_collection(ScoredRecord(record=r, relevance=1) for r in self.dataset)
            results["geometry"] = len(fc["features"]) == stats["valid_bbox"] and stats["valid_bbox"] > 0
        except Exception as e:
            self.logger.exception("Geometry check raised an exception: %s", e)
            results["geometry"] = False

        if run_embedding and self.embedding_health is not None:
            results["embedding_health"] = self.embedding_health.run()

        for name, ok in results.items():
            if ok:
                self.logger.info("%s: PASS", name)
            else:
                self.logger.error("%s: FAIL", name)
        return results

    def deep_health(self, run_embedding: bool = True) -> DeepHealthResponse:

        results = self.run_all(run_embedding=run_embedding)

        total = len(results)
        passed = sum(1 for ok in results.values() if ok)
        failed = total - passed

        overall_status = "ok" if failed == 0 else "error"

        summary = SmokeTestSummary(
            total=total,
            passed=passed,
            failed=failed,
        )

        return DeepHealthResponse(
            status=overall_status,
            results=results,
            summary=summary,
        )
