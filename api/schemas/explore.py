# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-24
# Description: explore.py
# -----------------------------------------------------------------------------
from typing import List, Optional

from pydantic import BaseModel

from api.schemas.search import SearchHit


class ExploreStateResponse(BaseModel):
    open: bool
    index: int
    total: int
    has_prev: bool
    has_next: bool
    item: Optional[SearchHit] = None
    highlight_bounds: Optional[List[List[float]]] = None
