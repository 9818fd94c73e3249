# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-27
# Description: test_api_routes.py
# -----------------------------------------------------------------------------
import logging

import pytest
from starlette.testclient import TestClient

import settings
from api.dependencies import get_explore_controller, get_health_service, get_search_service
from api.main import app
from services.GeoExploreController import GeoExploreController
from services.GeoHealthService import GeoHealthService
from services.GeoSearchService import GeoSearchService

logger = logging.getLogger(__name__)


@pytest.fixture
def controller(two_record_dataset):
    return GeoExploreController(search_service=GeoSearchService(dataset=two_record_dataset))


@pytest.fixture
def client(two_record_dataset, controller):
    svc = controller.search_service
    health = GeoHealthService(dataset=two_record_dataset)

    app.dependency_overrides[get_search_service] = lambda: svc
    app.dependency_overrides[get_explore_controller] = lambda: controller
    app.dependency_overrides[get_health_service] = lambda: health
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_post_search(client):
    resp = client.post("/search", json={"query": "bridge river", "viewport": [85.5, 27.61, 85.54, 27.65]})
    assert resp.status_code == 200, resp.text

    data = resp.json()
    assert data["count"] == 1
    assert data["mode_used"] == "term"
    assert data["applied"] is True
    hit = data["results"][0]
    assert hit["index"] == 0
    assert hit["score"] == 2
    assert hit["polygon"] == [[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]

    feature = data["geojson"]["features"][0]
    assert feature["geometry"]["type"] == "Polygon"
    assert feature["properties"] == {"description": "a blue bridge over a river", "score": 2, "index": 0}
    assert data["fit_bounds"] == [[0, 0], [1, 1]]
    assert data["url"] == "/?query=bridge%20river&bbox=85.5%2C27.61%2C85.54%2C27.65"


def test_post_search_drops_non_finite_viewport(client, controller):
    resp = client.post(
        "/search",
        content='{"query": "bridge river", "viewport": [Infinity, 0, 1, 1]}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 200, resp.text

    data = resp.json()
    assert data["count"] == 1
    assert data["url"] == "/?query=bridge%20river"
    assert controller.applied_generation == data["generation"] == 1
    assert len(controller.results) == 1


def test_post_search_projects_results_once(client, monkeypatch):
    import services.GeoSearchService as search_module

    calls = []
    real = search_module.to_feature_collection

    def counting(results):
        calls.append(1)
        return real(results)

    monkeypatch.setattr(search_module, "to_feature_collection", counting)

    data = client.post("/search", json={"query": "bridge river"}).json()

    assert data["fit_bounds"] == [[0, 0], [1, 1]]
    assert len(calls) == 1


@pytest.mark.parametrize("query", ["", "   "])
def test_post_search_blank_query(client, query):
    resp = client.post("/search", json={"query": query})

    assert resp.status_code == 400
    assert resp.json()["detail"] == settings.BLANK_QUERY_PROMPT


def test_post_search_embedding_falls_back_without_provider(client):
    resp = client.post("/search", json={"query": "bridge river", "mode": "embedding"})

    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["requested_mode"] == "embedding"
    assert data["mode_used"] == "term"
    assert data["fallback_reason"]


def test_post_search_no_results(client):
    data = client.post("/search", json={"query": "swimming pool"}).json()

    assert data["count"] == 0
    assert data["geojson"] == {"type": "FeatureCollection", "features": []}
    assert data["fit_bounds"] is None


def test_explore_flow(client):
    client.post("/search", json={"query": "a"})

    state = client.get("/explore").json()
    assert state["open"] is False and state["total"] == 2

    state = client.post("/explore/start").json()
    assert state["open"] is True
    assert state["index"] == 0
    assert state["highlight_bounds"] is not None

    state = client.post("/explore/next").json()
    assert state["index"] == 1 and state["has_next"] is False
    assert client.post("/explore/next").json()["index"] == 1
    assert client.post("/explore/prev").json()["index"] == 0

    state = client.post("/explore/close").json()
    assert state["open"] is False and state["highlight_bounds"] is None


def test_state_restores_query_and_viewport(client):
    resp = client.get("/state", params={"query": "bridge", "bbox": "0,0,1,1"})
    assert resp.status_code == 200, resp.text

    data = resp.json()
    assert data["query"] == "bridge"
    assert data["viewport"] == [0, 0, 1, 1]
    assert data["search"]["count"] == 1


def test_state_ignores_bad_bbox_and_missing_query(client):
    data = client.get("/state", params={"bbox": "a,b,c,d"}).json()
    assert data == {"query": None, "viewport": None, "search": None}


def test_health(client):
    data = client.get("/health/").json()
    assert data["status"] == "ok"
    assert data["records"] == 2

    deep = client.get("/health/deep").json()
    assert deep["status"] == "ok"
    assert deep["summary"]["failed"] == 0


def test_dataset_and_map_config(client):
    stats = client.get("/dataset").json()
    assert stats == {"path": str(settings.DATASET_PATH), "records": 2, "described": 2, "valid_bbox": 2}

    cfg = client.get("/map/config").json()
    assert cfg["initial_bounds"] == [[27.6152, 85.5098], [27.6512, 85.5457]]
    assert cfg["example_queries"] == settings.EXAMPLE_QUERIES
    assert len(cfg["tile_layers"]) == 2
