# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-18
# Description: MapView
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import settings

LatLng = Tuple[float, float]


@dataclass(frozen=True)
class MapView:
    """Static map surface configuration: where the map opens and how far it may pan."""

    initial_bounds: Tuple[LatLng, LatLng] = settings.MAP_INITIAL_BOUNDS
    center: LatLng = settings.MAP_CENTER
    zoom: int = settings.MAP_ZOOM
    min_zoom: int = settings.MAP_MIN_ZOOM
    max_zoom: int = settings.MAP_MAX_ZOOM
    max_bounds_viscosity: float = settings.MAP_MAX_BOUNDS_VISCOSITY
    unbounded_zoom: int = settings.MAP_UNBOUNDED_ZOOM
    tile_layers: List[Dict[str, Any]] = field(default_factory=lambda: list(settings.MAP_TILE_LAYERS))

    def max_bounds_for_zoom(self, zoom: int) -> Optional[Tuple[LatLng, LatLng]]:
        # Lifted when zoomed in past the threshold
        if zoom > self.unbounded_zoom:
            return None
        return self.initial_bounds

    def to_dict(self) -> Dict[str, Any]:
        return {
            "initial_bounds": [list(p) for p in self.initial_bounds],
            "center": list(self.center),
            "zoom": self.zoom,
            "min_zoom": self.min_zoom,
            "max_zoom": self.max_zoom,
            "max_bounds_viscosity": self.max_bounds_viscosity,
            "unbounded_zoom": self.unbounded_zoom,
            "tile_layers": [dict(layer) for layer in self.tile_layers],
            "result_style": dict(settings.RESULT_STYLE),
            "highlight_style": dict(settings.HIGHLIGHT_STYLE),
        }
