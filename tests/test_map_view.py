# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-06
# Description: test_map_view.py
# -----------------------------------------------------------------------------
import html
import json

import settings
from geometry.MapView import MapView
from ui.map_html import build_map_iframe, build_map_page


def test_defaults_follow_settings():
    view = MapView()
    assert view.initial_bounds == settings.MAP_INITIAL_BOUNDS
    assert view.min_zoom <= view.zoom <= view.max_zoom


def test_max_bounds_lifted_past_unbounded_zoom():
    view = MapView()
    assert view.max_bounds_for_zoom(view.unbounded_zoom) == view.initial_bounds
    assert view.max_bounds_for_zoom(view.unbounded_zoom + 1) is None


def test_to_dict_is_json_ready():
    cfg = MapView().to_dict()
    assert json.loads(json.dumps(cfg)) == cfg
    assert cfg["initial_bounds"] == [[27.6152, 85.5098], [27.6512, 85.5457]]


def test_map_page_embeds_results_and_highlight():
    fc = {
        "type": "FeatureCollection",
        "features": [{
            "type": "Feature",
            "geometry": {"type": "Polygon", "coordinates": [[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]]},
            "properties": {"description": "</script><b>river</b>", "score": 1, "index": 0},
        }],
    }
    page = build_map_page(MapView().to_dict(), geojson=fc, highlight_bounds=[[0, 0], [1, 1]])

    assert "leaflet@1.9.4" in page
    assert "const highlight = [[0, 0], [1, 1]];" in page
    # description text must not close the inline script
    assert page.count("</script>") == 2


def test_iframe_escapes_page():
    frame = build_map_iframe(MapView().to_dict())
    assert frame.startswith('<iframe srcdoc="')
    assert "<script" not in frame
    assert html.unescape(frame).count("L.map(") == 1
