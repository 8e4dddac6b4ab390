"""Tests for the HTTP feed server."""
import httpx
import pytest
from fastapi.testclient import TestClient

from shoprss.core.shop_client import ShopClient
from shoprss.deps import get_shop_client
from shoprss.main import app
from tests.helpers import json_transport


def override_client(transport: httpx.MockTransport):
    async def _get_shop_client():
        client = ShopClient("https://shop.example/v2/shop", transport=transport)
        try:
            yield client
        finally:
            await client.close()
    return _get_shop_client


@pytest.fixture
def api_client():
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


def test_feed_ok(api_client, shop_payload):
    """Successful fetch returns the RSS document."""
    app.dependency_overrides[get_shop_client] = override_client(json_transport(shop_payload))

    response = api_client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/rss+xml; charset=utf-8"
    assert response.text.startswith('<?xml version="1.0" encoding="utf-8"?>')
    assert response.text.count("<item>") == 2
    assert 'href="http://testserver/"' in response.text


def test_feed_any_path_rebuilds(api_client, shop_payload):
    """Every request triggers its own upstream fetch."""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=shop_payload)

    app.dependency_overrides[get_shop_client] = override_client(httpx.MockTransport(handler))

    assert api_client.get("/").status_code == 200
    assert api_client.get("/feed.xml").status_code == 200
    assert len(calls) == 2


def test_feed_upstream_error_is_502(api_client):
    """Upstream failure is reported as 502 with the message as text."""
    app.dependency_overrides[get_shop_client] = override_client(
        json_transport({"error": "down"}, status_code=503)
    )

    response = api_client.get("/")

    assert response.status_code == 502
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "API returned HTTP 503"


def test_feed_malformed_snapshot_is_502(api_client):
    """Build errors are reported as 502 too."""
    app.dependency_overrides[get_shop_client] = override_client(json_transport({"data": {"entries": "x"}}))

    response = api_client.get("/")

    assert response.status_code == 502
    assert "entries" in response.text


def test_health(api_client):
    """Health check does not hit upstream."""
    response = api_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.parametrize("method", ["GET", "HEAD", "POST", "PUT", "DELETE"])
def test_feed_any_method(api_client, shop_payload, method):
    """Every request method gets the feed, not 405."""
    app.dependency_overrides[get_shop_client] = override_client(json_transport(shop_payload))

    response = api_client.request(method, "/")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/rss+xml; charset=utf-8"


def test_feed_any_method_upstream_error_is_502(api_client):
    """Failures on non-GET requests are 502 as well."""
    app.dependency_overrides[get_shop_client] = override_client(json_transport({}, status_code=500))

    assert api_client.post("/feed.xml").status_code == 502
