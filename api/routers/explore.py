# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-26
# Description: explore router
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_explore_controller
from api.routers.search import to_hit
from api.schemas.explore import ExploreStateResponse
from services.GeoExploreController import ExploreState, GeoExploreController

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/explore", tags=["explore"])


def to_state_response(state: ExploreState) -> ExploreStateResponse:
    return ExploreStateResponse(
        open=state.open,
        index=state.index,
        total=state.total,
        has_prev=state.has_prev,
        has_next=state.has_next,
        item=to_hit(state.item) if state.item is not None else None,
        highlight_bounds=state.highlight_bounds,
    )


@router.get("", response_model=ExploreStateResponse)
def get_explore_state(
    controller: GeoExploreController = Depends(get_explore_controller),
) -> ExploreStateResponse:
    return to_state_response(controller.state())


@router.post("/start", response_model=ExploreStateResponse)
def start_explore(
    controller: GeoExploreController = Depends(get_explore_controller),
) -> ExploreStateResponse:
    state = controller.start()
    logger.info("POST /explore/start open=%s total=%d", state.open, state.total)
    return to_state_response(state)


@router.post("/next", response_model=ExploreStateResponse)
def next_item(
    controller: GeoExploreController = Depends(get_explore_controller),
) -> ExploreStateResponse:
    state = controller.next()
    logger.info("POST /explore/next index=%d/%d", state.index, state.total)
    return to_state_response(state)


@router.post("/prev", response_model=ExploreStateResponse)
def prev_item(
    controller: GeoExploreController = Depends(get_explore_controller),
) -> ExploreStateResponse:
    state = controller.prev()
    logger.info("POST /explore/prev index=%d/%d", state.index, state.total)
    return to_state_response(state)


@router.post("/close", response_model=ExploreStateResponse)
def close_explore(
    controller: GeoExploreController = Depends(get_explore_controller),
) -> ExploreStateResponse:
    return to_state_response(controller.close())
