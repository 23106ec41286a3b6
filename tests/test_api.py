"""HTTP-level tests through FastAPI's TestClient; the network is faked."""

import pytest
from fastapi.testclient import TestClient

import api.routes.geosearch as geosearch_routes
import modules.region_analyzer as region_analyzer
from app import app
from modules.errors import UpstreamRequestFailed, UpstreamStatusError
from tests.conftest import FakeFetcher


@pytest.fixture
def client():
    """Test client fixture"""
    return TestClient(app)


@pytest.fixture
def overpass(monkeypatch):
    """Route the analyzer's default fetcher to a FakeFetcher."""
    fake = FakeFetcher([])
    monkeypatch.setattr(region_analyzer, "fetch_overpass_elements", fake)
    return fake


class TestHealth:

    def test_health(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_root_banner(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "Urbanscope" in response.json()["message"]


class TestAnalyzeRegion:

    def test_camel_case_report(self, client, overpass, city_block_elements):
        overpass.elements = city_block_elements
        response = client.post(
            "/api/v1/analyze-region", json={"bounds": [[0.0, 0.0], [0.1, 0.1]]}
        )
        assert response.status_code == 200
        body = response.json()

        assert set(body) == {
            "area", "center", "amenities", "populationData",
            "infraScore", "infraRating", "transport",
        }
        assert body["amenities"] == {
            "hospitals": 2, "police": 1, "fireStations": 1, "schools": 2, "parks": 1,
        }
        assert set(body["populationData"]) == {
            "current", "growthRate", "projected5Year", "projected10Year",
        }
        assert body["populationData"]["growthRate"] == 2.5
        assert set(body["transport"]) == {"roadKmTotal", "roadDensityKmPerKm2", "transitStops"}
        assert body["transport"]["transitStops"] == 2
        assert 0 <= body["infraScore"] <= 100
        assert len(overpass.queries) == 1

    def test_wrong_corner_count_is_400(self, client, overpass):
        response = client.post("/api/v1/analyze-region", json={"bounds": [[0.0, 0.0]]})
        assert response.status_code == 400
        assert response.json()["detail"].startswith("Invalid bounds")
        assert overpass.queries == []

    def test_wrong_coordinate_count_is_400(self, client, overpass):
        response = client.post(
            "/api/v1/analyze-region", json={"bounds": [[0.0, 0.0, 0.0], [1.0, 1.0]]}
        )
        assert response.status_code == 400

    def test_overflowing_coordinates_are_400(self, client, overpass):
        response = client.post(
            "/api/v1/analyze-region", json={"bounds": [[0, 0], [1e200, 1e200]]}
        )
        assert response.status_code == 400
        assert response.json()["detail"].startswith("Invalid bounds")
        assert overpass.queries == []

    def test_non_numeric_body_is_422(self, client, overpass):
        response = client.post("/api/v1/analyze-region", json={"bounds": "somewhere"})
        assert response.status_code == 422

    def test_upstream_status_is_502(self, client, overpass):
        overpass.error = UpstreamStatusError("Overpass", 429)
        response = client.post(
            "/api/v1/analyze-region", json={"bounds": [[0.0, 0.0], [0.1, 0.1]]}
        )
        assert response.status_code == 502
        assert response.json() == {"detail": "Overpass non-OK status: 429"}

    def test_upstream_transport_is_502(self, client, overpass):
        overpass.error = UpstreamRequestFailed("Overpass request error: connection refused")
        response = client.post(
            "/api/v1/analyze-region", json={"bounds": [[0.0, 0.0], [0.1, 0.1]]}
        )
        assert response.status_code == 502
        assert "connection refused" in response.json()["detail"]


class TestGeosearch:

    def test_blank_query(self, client):
        response = client.post("/api/v1/geosearch", json={"query": "  "})
        assert response.status_code == 200
        assert response.json() == []

    def test_results(self, client, monkeypatch):
        async def fake_search(query):
            return [{"x": 13.4, "y": 52.5, "label": f"{query}, Germany"}]

        monkeypatch.setattr(geosearch_routes, "search_places", fake_search)
        response = client.post("/api/v1/geosearch", json={"query": "Berlin"})
        assert response.status_code == 200
        assert response.json() == [{"x": 13.4, "y": 52.5, "label": "Berlin, Germany"}]

    def test_upstream_failure(self, client, monkeypatch):
        async def failing_search(query):
            raise UpstreamStatusError("Nominatim", 503)

        monkeypatch.setattr(geosearch_routes, "search_places", failing_search)
        response = client.post("/api/v1/geosearch", json={"query": "Berlin"})
        assert response.status_code == 502
        assert response.json()["detail"] == "Nominatim non-OK status: 503"
