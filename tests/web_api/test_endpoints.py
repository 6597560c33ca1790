"""
Web API Endpoint Tests
======================
Integration tests for the lyrics API.

Usage:
    pip install bottles-of-beer[test]
    pytest tests/web_api/test_endpoints.py -v
"""
import re

import pytest


# Skip entire module if FastAPI not installed
pytest.importorskip("fastapi")


from fastapi.testclient import TestClient
from bottles.web_api.main import app


@pytest.fixture
def client():
    """Create test client for FastAPI app."""
    return TestClient(app)


# ============================================================================
# HEALTH ENDPOINT
# ============================================================================

class TestHealthEndpoint:
    """Tests for GET /health and GET /ready"""

    def test_health_returns_ok_status(self, client):
        """Health endpoint returns status: ok."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_health_includes_version(self, client):
        """Health endpoint includes version field."""
        data = client.get("/health").json()
        assert "version" in data

    def test_ready(self, client):
        """Readiness reports ready once lyrics generate."""
        assert client.get("/ready").json() == {"status": "ready"}


# ============================================================================
# PAGE ENDPOINTS
# ============================================================================

class TestPageEndpoint:
    """Tests for GET / and GET /lyrics"""

    def test_page_is_html(self, client):
        """Page is served as UTF-8 HTML."""
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].lower() == "text/html; charset=utf-8"
        assert response.text.startswith("<!DOCTYPE html>")

    def test_page_has_controls(self, client):
        """Page carries the toggle and restart controls."""
        text = client.get("/").text
        assert 'id="sing-along"' in text
        assert 'id="restart"' in text

    def test_security_headers(self, client):
        """Every response carries the security headers."""
        for path in ("/", "/lyrics", "/health"):
            headers = client.get(path).headers
            assert headers["x-content-type-options"] == "nosniff"
            assert headers["x-frame-options"] == "DENY"
            assert headers["x-xss-protection"] == "1; mode=block"

    def test_fragment_order(self, client):
        """Lyrics fragment lists verses 99 down to 0."""
        text = client.get("/lyrics").text
        ids = [int(n) for n in re.findall(r'<div id="verse-(\d+)"', text)]
        assert ids == list(range(99, -1, -1))


# ============================================================================
# VERSE ENDPOINTS
# ============================================================================

class TestVerseEndpoint:
    """Tests for GET /verses and GET /verses/{n}"""

    def test_list_verses(self, client):
        """All 100 verses in singing order."""
        data = client.get("/verses").json()
        assert data["count"] == 100
        assert [v["n"] for v in data["verses"]] == list(range(99, -1, -1))

    def test_single_verse(self, client):
        """Single verse has text and markup."""
        data = client.get("/verses/1").json()
        assert data["id"] == "verse-1"
        assert data["noun"] == "bottle"
        assert data["lines"][-1] == "no more bottles of beer on the wall."
        assert 'id="verse-text-1"' in data["html"]

    def test_restock_verse(self, client):
        """Verse 0 uses the restock phrasing."""
        data = client.get("/verses/0").json()
        assert data["kind"] == "restock"
        assert data["count"] == "No more"

    @pytest.mark.parametrize("n", [100, -1, 500])
    def test_out_of_range_returns_404(self, client, n):
        """Verse numbers outside 0..99 return 404."""
        response = client.get(f"/verses/{n}")
        assert response.status_code == 404
        assert "out of range" in response.json()["detail"]

    def test_non_integer_returns_422(self, client):
        """Non-integer path is a validation error."""
        assert client.get("/verses/abc").status_code == 422
