# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-16
# Description: GeoJSONBuilder
# -----------------------------------------------------------------------------
from typing import Any, Dict, Iterable, List, Optional

from shapely.geometry import mapping, shape

from geometry.BoundingBox import BoundingBox, try_parse_bounding_box
from record.GeoRecord import ScoredRecord
from utility.logging_utils import get_logger

logger = get_logger(__name__)

LatLngBounds = List[List[float]]


def _as_lists(coords: Any) -> Any:
    # shapely hands back nested tuples; the wire format is nested lists
    if isinstance(coords, (list, tuple)):
        return [_as_lists(c) for c in coords]
    return coords


def to_polygon(box: BoundingBox) -> List[List[float]]:
    """
    Closed 5-point ring in (lon, lat) order:
    minLon/minLat -> minLon/maxLat -> maxLon/maxLat -> maxLon/minLat -> close.
    """
    return _as_lists(box.to_shape().exterior.coords)


def to_highlight_bounds(box: BoundingBox) -> LatLngBounds:
    """[[south, west], [north, east]] for a rectangle overlay / fitBounds."""
    min_lon, min_lat, max_lon, max_lat = box
    return [[min_lat, min_lon], [max_lat, max_lon]]


def _as_lists_geometry(geometry: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": geometry["type"], "coordinates": _as_lists(geometry["coordinates"])}


def to_feature(scored: ScoredRecord, box: Optional[BoundingBox] = None) -> Optional[Dict[str, Any]]:
    box = box or try_parse_bounding_box(scored.record.bbox)
    if box is None:
        return None

    return {
        "type": "Feature",
        "geometry": _as_lists_geometry(mapping(box.to_shape())),
        "properties": {
            "description": scored.description,
            "score": scored.relevance,
            "index": scored.index,
        },
    }


def to_feature_collection(results: Iterable[ScoredRecord]) -> Dict[str, Any]:
    """
    One Polygon feature per result, in result order. Results whose bbox does
    not parse are skipped (and logged) without stopping the rest.
    """
    features: List[Dict[str, Any]] = []
    skipped = 0
    for scored in results:
        feature = to_feature(scored)
        if feature is None:
            skipped += 1
            continue
        features.append(feature)

    if skipped:
        logger.warning("FeatureCollection built with %d result(s) skipped for invalid bbox", skipped)

    return {"type": "FeatureCollection", "features": features}


def feature_collection_bounds(collection: Dict[str, Any]) -> Optional[LatLngBounds]:
    """Bounds covering every feature, or None for an empty collection."""
    bounds = [shape(f["geometry"]).bounds for f in collection.get("features") or []]
    if not bounds:
        return None

    min_lon = min(b[0] for b in bounds)
    min_lat = min(b[1] for b in bounds)
    max_lon = max(b[2] for b in bounds)
    max_lat = max(b[3] for b in bounds)
    return [[min_lat, min_lon], [max_lat, max_lon]]
