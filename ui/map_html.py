# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-05
# Description: map_html.py
# -----------------------------------------------------------------------------
import html
import json
from typing import Any, Dict, List, Optional

LEAFLET_VERSION = "1.9.4"

_PAGE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<link rel="stylesheet" href="https://unpkg.com/leaflet@{version}/dist/leaflet.css">
<script src="https://unpkg.com/leaflet@{version}/dist/leaflet.js"></script>
<style>html, body, #map {{ height: 100%; margin: 0; }}</style>
</head>
<body>
<div id="map"></div>
<script>
const cfg = {config};
const results = {geojson};
const highlight = {highlight};
const fit = {fit};

const map = L.map('map', {{
  center: cfg.center,
  zoom: cfg.zoom,
  maxBounds: cfg.initial_bounds,
  maxBoundsViscosity: cfg.max_bounds_viscosity
}});
map.on('zoomend', () => {{
  map.setMaxBounds(map.getZoom() > cfg.unbounded_zoom ? null : cfg.initial_bounds);
}});
cfg.tile_layers.forEach(layer => {{
  const opts = {{attribution: layer.attribution, minZoom: cfg.min_zoom, maxZoom: cfg.max_zoom}};
  if (layer.subdomains) opts.subdomains = layer.subdomains;
  L.tileLayer(layer.url, opts).addTo(map);
}});
if (results && results.features.length) {{
  L.geoJSON(results, {{
    style: cfg.result_style,
    onEachFeature: (feature, layer) => {{
      if (feature.properties && feature.properties.description) {{
        layer.bindPopup(feature.properties.description);
      }}
    }}
  }}).addTo(map);
}}
if (highlight) {{
  L.rectangle(highlight, cfg.highlight_style).addTo(map);
}}
if (fit) {{
  map.fitBounds(fit);
}}
</script>
</body>
</html>
"""


def _js(value: Any) -> str:
    # "</" would end the inline <script> early
    return json.dumps(value).replace("</", "<\\/")


def build_map_page(
    map_config: Dict[str, Any],
    geojson: Optional[Dict[str, Any]] = None,
    highlight_bounds: Optional[List[List[float]]] = None,
    fit_bounds: Optional[List[List[float]]] = None,
) -> str:
    """Standalone Leaflet page: base layers, result polygons, optional highlight rectangle."""
    return _PAGE.format(
        version=LEAFLET_VERSION,
        config=_js(map_config),
        geojson=_js(geojson),
        highlight=_js(highlight_bounds),
        fit=_js(highlight_bounds or fit_bounds),
    )


def build_map_iframe(
    map_config: Dict[str, Any],
    geojson: Optional[Dict[str, Any]] = None,
    highlight_bounds: Optional[List[List[float]]] = None,
    fit_bounds: Optional[List[List[float]]] = None,
    height: int = 520,
) -> str:
    """gr.HTML does not run scripts, so the page goes into an iframe srcdoc."""
    page = build_map_page(map_config, geojson, highlight_bounds, fit_bounds)
    return (
        f'<iframe srcdoc="{html.escape(page, quote=True)}" '
        f'style="width: 100%; height: {height}px; border: 0;"></iframe>'
    )
