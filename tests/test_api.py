"""
API tests for the Field Analysis service
"""

import pytest
from fastapi.testclient import TestClient

from field_analysis.main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:
    """Test cases for the health endpoint"""

    def test_health(self, client):
        """Test health check reports service status"""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert "entries" in data["cache"]


class TestSemanticsEndpoints:
    """Test cases for the detection endpoints"""

    def test_detect_price(self, client):
        """Test single field detection returns ranked results and best match"""
        response = client.post("/v1/semantics/detect", json={
            "path": "items[].price",
            "name": "price",
            "type": "number",
            "sampleValues": [29.99]
        })

        assert response.status_code == 200
        data = response.json()
        assert data["results"][0]["category"] == "price"
        assert data["bestMatch"]["level"] == "high"
        assert data["metadata"]["applied_at"] == "smart-default"

    def test_detect_with_hints(self, client):
        """Test schema hints are accepted"""
        response = client.post("/v1/semantics/detect", json={
            "path": "created",
            "name": "created",
            "type": "string",
            "sampleValues": ["2024-01-15T10:30:00Z"],
            "hints": {"format": "date-time"}
        })

        assert response.status_code == 200
        assert response.json()["results"][0]["category"] == "timestamp"

    def test_detect_requires_name(self, client):
        """Test invalid bodies are rejected"""
        response = client.post("/v1/semantics/detect", json={"path": "x", "type": "string"})

        assert response.status_code == 422

    def test_composite(self, client):
        """Test composite detection for a reviews array"""
        response = client.post("/v1/semantics/composite", json={
            "path": "reviews",
            "name": "reviews",
            "itemFields": [{"name": "rating", "type": "number"}, {"name": "comment", "type": "string"}],
            "sampleItems": [{"rating": 5, "comment": "Great"}]
        })

        assert response.status_code == 200
        assert response.json()["result"]["category"] == "reviews"

    def test_clear_cache(self, client):
        """Test cache clearing returns the evicted entry count"""
        client.post("/v1/semantics/detect", json={
            "path": "email", "name": "email", "type": "string", "sampleValues": ["a@b.co"]
        })

        first = client.delete("/v1/semantics/cache")
        second = client.delete("/v1/semantics/cache")

        assert first.status_code == 200
        assert first.json()["cleared"] >= 1
        assert second.json()["cleared"] == 0


class TestAnalyzeEndpoint:
    """Test cases for full field list analysis"""

    def test_analyze_billing_fields(self, client):
        """Test analysis returns semantics, importance and grouping"""
        names = ["billing_address", "billing_city", "billing_zip", "flag", "enabled", "visible", "archived", "hidden"]
        fields = [{"path": n, "name": n, "type": "string", "sampleValues": ["x"]} for n in names]

        response = client.post("/v1/fields/analyze", json={"fields": fields})

        assert response.status_code == 200
        data = response.json()
        assert set(data["importance"]) == set(names)
        assert data["grouping"]["groups"][0]["label"] == "Billing"
        assert len(data["grouping"]["ungrouped"]) == 5

    def test_analyze_semantic_category_override(self, client):
        """Test an unknown semantic category is rejected"""
        response = client.post("/v1/fields/analyze", json={
            "fields": [{"path": "a", "name": "a", "type": "string", "semanticCategory": "nonsense"}]
        })

        assert response.status_code == 422
