# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-15
# Description: BoundingBox
# -----------------------------------------------------------------------------
import math
import re
from collections.abc import Sequence
from typing import Any, NamedTuple, Optional

from shapely.geometry import Polygon, box

from search.errors import BoundingBoxParseError
from utility.logging_utils import get_logger

logger = get_logger(__name__)

# Plain ASCII decimal, optional sign and exponent; no "1_000", no "inf"
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_WRAPPERS = "()[]"


class BoundingBox(NamedTuple):
    """Axis-aligned rectangle in (lon, lat) degrees."""
    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float

    def to_param(self) -> str:
        """Comma-joined `minLon,minLat,maxLon,maxLat`, as used in the URL."""
        return ",".join(_format_number(v) for v in self)

    def to_shape(self) -> Polygon:
        """Shapely rectangle; exterior ring runs minLon/minLat, minLon/maxLat, maxLon/maxLat, maxLon/minLat."""
        return box(self.min_lon, self.min_lat, self.max_lon, self.max_lat, ccw=False)


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def _to_float(token: Any, raw: Any) -> float:
    if isinstance(token, bool):
        raise BoundingBoxParseError(raw, f"boolean is not a coordinate: {token!r}")
    if isinstance(token, str) and not _NUMBER_RE.fullmatch(token):
        raise BoundingBoxParseError(raw, f"not a number: {token!r}")
    try:
        value = float(token)
    except (TypeError, ValueError):
        raise BoundingBoxParseError(raw, f"not a number: {token!r}") from None
    if not math.isfinite(value):
        raise BoundingBoxParseError(raw, f"non-finite coordinate: {token!r}")
    return value


def _tokens_from_string(raw: str) -> list[str]:
    text = raw.strip()
    for ch in _WRAPPERS:
        text = text.replace(ch, " ")
    text = text.strip()
    if not text:
        return []
    if "," not in text:
        return text.split()

    tokens = [t.strip() for t in text.split(",")]
    if "" in tokens:
        raise BoundingBoxParseError(raw, "empty field between commas")
    return tokens


def parse_bounding_box(raw: Any) -> BoundingBox:
    """
    Parse a bbox given either as a string of four numbers, e.g.
    "(85.50,27.61,85.54,27.65)" or "85.50 27.61 85.54 27.65", or as a numeric
    4-sequence. Raises BoundingBoxParseError on anything else; never returns
    partial data.
    """
    if raw is None:
        raise BoundingBoxParseError(raw, "missing")

    if isinstance(raw, str):
        tokens: Sequence[Any] = _tokens_from_string(raw)
    elif isinstance(raw, Sequence) and not isinstance(raw, (bytes, bytearray)):
        tokens = list(raw)
    else:
        raise BoundingBoxParseError(raw, f"unsupported type {type(raw).__name__}")

    if len(tokens) != 4:
        raise BoundingBoxParseError(raw, f"expected 4 numbers, found {len(tokens)}")

    return BoundingBox(*(_to_float(t, raw) for t in tokens))


def try_parse_bounding_box(raw: Any) -> Optional[BoundingBox]:
    """Non-raising form for geometry steps: logs and returns None on failure."""
    try:
        return parse_bounding_box(raw)
    except BoundingBoxParseError as e:
        logger.warning("Skipping bbox: %s", e)
        return None
