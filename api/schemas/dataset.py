# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-25
# Description: dataset.py
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class DatasetStatsResponse(BaseModel):
    path: str
    records: int
    described: int
    valid_bbox: int


class TileLayer(BaseModel):
    name: str
    url: str
    attribution: str
    subdomains: Optional[str] = None


class MapConfigResponse(BaseModel):
    initial_bounds: List[List[float]]
    center: List[float]
    zoom: int
    min_zoom: int
    max_zoom: int
    max_bounds_viscosity: float
    unbounded_zoom: int
    tile_layers: List[TileLayer]
    result_style: Dict[str, Any]
    highlight_style: Dict[str, Any]
    example_queries: List[str]
