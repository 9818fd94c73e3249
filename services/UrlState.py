# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-22
# Description: UrlState.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import parse_qs, quote

from geometry.BoundingBox import BoundingBox, parse_bounding_box
from search.errors import BoundingBoxParseError
from utility.logging_utils import get_logger

logger = get_logger(__name__)

# Characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class UrlState:
    query: Optional[str] = None
    viewport: Optional[BoundingBox] = None


def encode_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_url(path: str, query: str, viewport: Optional[Any] = None) -> str:
    """
    `path?query=<text>&bbox=<minLon,minLat,maxLon,maxLat>`; the bbox part is
    omitted when no viewport is known.
    """
    url = f"{path}?query={encode_component(query)}"
    if viewport is not None:
        box = viewport if isinstance(viewport, BoundingBox) else parse_bounding_box(viewport)
        url += f"&bbox={encode_component(box.to_param())}"
    return url


def parse_url_state(query_string: str) -> UrlState:
    """
    Decode `query` and `bbox` from a query string (leading '?' allowed).
    A malformed bbox is logged and dropped; the query still applies.
    """
    params = parse_qs((query_string or "").lstrip("?"), keep_blank_values=True)

    query = (params.get("query") or [""])[0].strip() or None

    viewport = None
    raw_bbox = (params.get("bbox") or [""])[0].strip()
    if raw_bbox:
        viewport = parse_viewport(raw_bbox)

    return UrlState(query=query, viewport=viewport)


def parse_viewport(raw_bbox: Any) -> Optional[BoundingBox]:
    try:
        return parse_bounding_box(raw_bbox)
    except BoundingBoxParseError as e:
        logger.warning("Ignoring bbox URL parameter: %s", e)
        return None
