# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-24
# Description: search.py
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

ScoringModeName = Literal["term", "embedding"]


class SearchRequest(BaseModel):
    # Blank queries are rejected by the router with a user-facing prompt, not by validation
    query: str = ""
    mode: Optional[ScoringModeName] = None
    # Current map viewport [minLon, minLat, maxLon, maxLat], echoed into the shareable URL
    viewport: Optional[List[float]] = Field(None, min_length=4, max_length=4)
    include_geojson: bool = True
    path: str = "/"


class SearchHit(BaseModel):
    index: int
    description: Optional[str] = None
    score: float
    bbox: Any = None
    polygon: Optional[List[List[float]]] = None
    properties: Optional[Dict[str, Any]] = None


class SearchResponse(BaseModel):
    query: str
    requested_mode: ScoringModeName
    mode_used: ScoringModeName
    fallback_reason: Optional[str] = None
    generation: int
    applied: bool
    count: int
    results: List[SearchHit]
    geojson: Optional[Dict[str, Any]] = None
    fit_bounds: Optional[List[List[float]]] = None
    url: str


class UrlStateResponse(BaseModel):
    query: Optional[str] = None
    viewport: Optional[List[float]] = None
    search: Optional[SearchResponse] = None
