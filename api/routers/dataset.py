# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-27
# Description: dataset router
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends

import settings
from api.dependencies import get_dataset_loader, get_map_view, get_search_service
from api.schemas.dataset import DatasetStatsResponse, MapConfigResponse
from geometry.MapView import MapView
from loader.GeoDatasetLoader import GeoDatasetLoader
from services.GeoSearchService import GeoSearchService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["dataset"])


@router.get("/dataset", response_model=DatasetStatsResponse)
def get_dataset_stats(
    loader: GeoDatasetLoader = Depends(get_dataset_loader),
    svc: GeoSearchService = Depends(get_search_service),
) -> DatasetStatsResponse:
    stats = GeoDatasetLoader.describe(svc.dataset)
    logger.info("GET /dataset records=%d valid_bbox=%d", stats["records"], stats["valid_bbox"])
    return DatasetStatsResponse(path=str(loader.path), **stats)


@router.get("/map/config", response_model=MapConfigResponse)
def get_map_config(view: MapView = Depends(get_map_view)) -> MapConfigResponse:
    return MapConfigResponse(**view.to_dict(), example_queries=list(settings.EXAMPLE_QUERIES))
