# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-25
# Description: health.py
# -----------------------------------------------------------------------------
import logging
from fastapi import APIRouter, Depends, HTTPException, Query

from api.schemas.health import HealthResponse, DeepHealthResponse
from api.dependencies import get_cfg, get_health_service
from config.Config import Config
from services.GeoHealthService import GeoHealthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", response_model=HealthResponse)
def health_check(
    svc: GeoHealthService = Depends(get_health_service),
    cfg: Config = Depends(get_cfg),
) -> HealthResponse:
    return HealthResponse(
        status="ok",
        message="GeoExplorer API running",
        records=len(svc.dataset),
        embedding_configured=cfg.embedding_configured(),
    )


@router.get("/deep", response_model=DeepHealthResponse)
def deep_health_check(
    svc: GeoHealthService = Depends(get_health_service),
    run_embedding: bool = Query(True, description="Call the embedding provider if configured"),
) -> DeepHealthResponse:
    logger.info("GET /health/deep called (run_embedding=%s)", run_embedding)
    try:
        result = svc.deep_health(run_embedding=run_embedding)

        logger.info("GET /health/deep completed (status=%s)", result.status)
        return result

    except Exception as e:
        logger.exception("GET /health/deep failed: %s", e)
        raise HTTPException(status_code=500, detail=f"deep health failed: {e}")
