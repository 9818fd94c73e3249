# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-26
# Description: search router
# -----------------------------------------------------------------------------
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from api.dependencies import get_explore_controller
from api.schemas.search import SearchHit, SearchRequest, SearchResponse, UrlStateResponse
from geometry.BoundingBox import BoundingBox, try_parse_bounding_box
from geometry.GeoJSONBuilder import to_polygon
from record.GeoRecord import ScoredRecord
from search.errors import InvalidQuery
from services.GeoExploreController import GeoExploreController, SubmitResult
from services.UrlState import build_url, parse_url_state, parse_viewport

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])


def to_hit(scored: ScoredRecord) -> SearchHit:
    box = try_parse_bounding_box(scored.record.bbox)
    return SearchHit(
        index=scored.index,
        description=scored.description,
        score=float(scored.relevance),
        bbox=scored.record.bbox,
        polygon=to_polygon(box) if box is not None else None,
        properties=scored.record.extra or None,
    )


def to_search_response(
    submitted: SubmitResult,
    viewport: Optional[BoundingBox] = None,
    include_geojson: bool = True,
    path: str = "/",
) -> SearchResponse:
    outcome = submitted.outcome
    collection = outcome.feature_collection()
    return SearchResponse(
        query=outcome.query,
        requested_mode=outcome.requested_mode.value,
        mode_used=outcome.mode_used.value,
        fallback_reason=outcome.fallback_reason,
        generation=submitted.generation,
        applied=submitted.applied,
        count=outcome.count,
        results=[to_hit(s) for s in outcome.results],
        geojson=collection if include_geojson else None,
        fit_bounds=outcome.fit_bounds(collection),
        url=build_url(path, outcome.query, viewport),
    )


@router.post("/search", response_model=SearchResponse)
def post_search(
    req: SearchRequest,
    controller: GeoExploreController = Depends(get_explore_controller),
) -> SearchResponse:
    logger.info("POST /search (start) query='%s' mode=%s", (req.query or "")[:120], req.mode)

    # A bad viewport is dropped from the URL; the search still runs
    viewport = parse_viewport(req.viewport) if req.viewport is not None else None

    try:
        submitted = controller.submit(req.query, req.mode)
    except InvalidQuery as e:
        logger.warning("POST /search -> 400 (blank query)")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Search failed: %s", e)
        raise HTTPException(status_code=500, detail=f"Search failed: {e}")

    try:
        resp = to_search_response(submitted, viewport, req.include_geojson, req.path)
    except Exception as e:
        logger.exception("Failed to build search response: %s", e)
        raise HTTPException(status_code=500, detail=f"Failed to build results: {e}")

    logger.info("POST /search (done) count=%d mode_used=%s", resp.count, resp.mode_used)
    return resp


@router.get("/state", response_model=UrlStateResponse)
def get_state(
    request: Request,
    controller: GeoExploreController = Depends(get_explore_controller),
) -> UrlStateResponse:
    """
    Restore a shared link: decode `query` and `bbox`, then replay the search.
    A malformed bbox is ignored rather than rejected.
    """
    state = parse_url_state(request.url.query)

    viewport = list(state.viewport) if state.viewport is not None else None
    if state.query is None:
        return UrlStateResponse(query=None, viewport=viewport, search=None)

    try:
        submitted = controller.submit(state.query)
        search = to_search_response(submitted, state.viewport)
    except Exception as e:
        logger.exception("GET /state -> 500 query='%s': %s", state.query[:120], e)
        raise HTTPException(status_code=500, detail=f"Failed to restore state: {e}")

    return UrlStateResponse(query=state.query, viewport=viewport, search=search)
