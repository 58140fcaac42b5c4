"""Tests for the storefront HTTP client."""

import asyncio

import httpx
import pytest

from door_catalog_ops.adapters.storefront_client import HttpxStorefrontClient
from door_catalog_ops.domain.errors import ApiResponseError


def _client(handler) -> HttpxStorefrontClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxStorefrontClient(
        base_url="http://storefront.test",
        http_client=httpx.AsyncClient(transport=transport),
    )


def test_get_complete_data() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/catalog/doors/complete-data"
        assert request.headers["cache-control"] == "no-store"
        return httpx.Response(200, json={"data": {"models": []}})

    payload = asyncio.run(_client(handler).get_complete_data())

    assert payload == {"data": {"models": []}}


def test_non_success_raises_with_status_and_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="database unavailable")

    with pytest.raises(ApiResponseError) as excinfo:
        asyncio.run(_client(handler).get_complete_data())

    assert excinfo.value.status_code == 500
    assert excinfo.value.body == "database unavailable"


def test_refresh_returns_json_or_text() -> None:
    responses = iter(
        [
            httpx.Response(200, json={"success": True}),
            httpx.Response(200, text="cache cleared"),
        ]
    )

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/catalog/doors/complete-data/refresh"
        return next(responses)

    client = _client(handler)

    assert asyncio.run(client.refresh_complete_data()) == {"success": True}
    assert asyncio.run(client.refresh_complete_data()) == "cache cleared"


def test_head_returns_status_and_content_type() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "HEAD"
        return httpx.Response(200, headers={"content-type": "image/png"})

    status, content_type = asyncio.run(_client(handler).head("https://cdn/a.png"))

    assert status == 200
    assert content_type == "image/png"


def test_create_strips_trailing_slash() -> None:
    client = HttpxStorefrontClient.create("http://localhost:3000/")

    assert client.base_url == "http://localhost:3000"
    asyncio.run(client.close())
