# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-14
# Updated: 2026-10-02
# Description: settings.py
# -----------------------------------------------------------------------------
import os
from pathlib import Path
from typing import Any, Dict, List, Tuple

PROJECT_ROOT = Path(__file__).resolve().parent


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_float(name: str, default: float) -> float:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return float(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be a float, got {v!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Dataset
# -----------------------------------------------------------------------------
DATASET_PATH = Path(_env("GEO_DATASET_PATH", str(PROJECT_ROOT / "data" / "banepa.json")))

# Field names inside each dataset object
DESCRIPTION_FIELD = _env("GEO_DESCRIPTION_FIELD", "description_from_model")
BBOX_FIELD = _env("GEO_BBOX_FIELD", "bbox")


# -----------------------------------------------------------------------------
# Search defaults (env-controlled)
# -----------------------------------------------------------------------------
# "term" (substring term overlap) or "embedding" (cosine over embeddings)
SCORING_MODE_DEFAULT = _env("GEO_SCORING_MODE", "term").lower()

SIMILARITY_THRESHOLD = _env_float("GEO_SIMILARITY_THRESHOLD", 0.3)

EMBED_BATCH_SIZE = _env_int("GEO_EMBED_BATCH_SIZE", 64)
EMBED_MAX_RETRIES = _env_int("GEO_EMBED_MAX_RETRIES", 5)

# Shown when the user submits a blank query
BLANK_QUERY_PROMPT = "Please enter a question."

EXAMPLE_QUERIES: List[str] = [
    "river",
    "bridge",
    "blue roof",
    "bridge",
    "road",
    "trees",
    "buildings",
    "farm",
    "swimming pool",
]


# -----------------------------------------------------------------------------
# Map view (Banepa)
# -----------------------------------------------------------------------------
# [[south, west], [north, east]] in (lat, lon) order, as the map surface expects
MAP_INITIAL_BOUNDS: Tuple[Tuple[float, float], Tuple[float, float]] = (
    (27.6152, 85.5098),
    (27.6512, 85.5457),
)
MAP_CENTER: Tuple[float, float] = (27.65, 85.51)
MAP_ZOOM = _env_int("GEO_MAP_ZOOM", 14)
MAP_MIN_ZOOM = _env_int("GEO_MAP_MIN_ZOOM", 14)
MAP_MAX_ZOOM = _env_int("GEO_MAP_MAX_ZOOM", 21)
MAP_MAX_BOUNDS_VISCOSITY = _env_float("GEO_MAP_MAX_BOUNDS_VISCOSITY", 0.2)

# Above this zoom the max bounds are lifted, otherwise viscosity keeps pulling the view back
MAP_UNBOUNDED_ZOOM = _env_int("GEO_MAP_UNBOUNDED_ZOOM", 18)

MAP_TILE_LAYERS: List[Dict[str, Any]] = [
    {
        "name": "CartoDB Light",
        "url": "https://basemaps.cartocdn.com/light_all/{z}/{x}/{y}{r}.png",
        "attribution": '&copy; <a href="https://www.carto.com/">CartoDB</a>',
        "subdomains": "abcd",
    },
    {
        "name": "OpenAerialMap",
        "url": _env(
            "GEO_AERIAL_TILE_URL",
            "https://tiles.openaerialmap.org/62d85d11d8499800053796c1/0/62d85d11d8499800053796c2/{z}/{x}/{y}",
        ),
        "attribution": "&copy; OpenAerialMap",
    },
]

RESULT_STYLE: Dict[str, Any] = {"color": "yellow", "weight": 2}
HIGHLIGHT_STYLE: Dict[str, Any] = {"color": "green", "weight": 2, "fillOpacity": 0.2}


# -----------------------------------------------------------------------------
# API / UI
# -----------------------------------------------------------------------------
API_BASE_URL = _env("GEO_API_BASE_URL", "http://127.0.0.1:8000").rstrip("/")
UI_PATH = _env("GEO_UI_PATH", "/ui")
MOUNT_UI = _env_bool("GEO_MOUNT_UI", True)
UI_TIMEOUT_SECONDS = _env_int("GEO_UI_TIMEOUT_SECONDS", 30)
UI_LOG_TAIL_LINES = _env_int("GEO_UI_LOG_TAIL_LINES", 400)
LOG_FILE = _env("GEO_LOG_FILE", "./logs/geoexplorer.log")


# -----------------------------------------------------------------------------
# Sanity checks (tunable)
# -----------------------------------------------------------------------------
if SCORING_MODE_DEFAULT not in ("term", "embedding"):
    raise RuntimeError(f"GEO_SCORING_MODE must be 'term' or 'embedding', got {SCORING_MODE_DEFAULT!r}")

if not 0.0 <= SIMILARITY_THRESHOLD <= 1.0:
    raise RuntimeError(f"GEO_SIMILARITY_THRESHOLD must be within [0, 1], got {SIMILARITY_THRESHOLD}")

if EMBED_BATCH_SIZE < 1 or EMBED_MAX_RETRIES < 1:
    raise RuntimeError("GEO_EMBED_BATCH_SIZE and GEO_EMBED_MAX_RETRIES must be >= 1")

if MAP_MIN_ZOOM > MAP_MAX_ZOOM:
    raise RuntimeError("GEO_MAP_MIN_ZOOM must not exceed GEO_MAP_MAX_ZOOM")
