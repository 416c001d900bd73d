"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from fitness_tracker.adapters.open_food_facts_client import HttpxOpenFoodFactsClient


def test_open_food_facts_search_and_product() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path.endswith("/cgi/search.pl"):
            return httpx.Response(200, json={"products": []})
        return httpx.Response(200, json={"status": 1, "product": {"code": "123"}})

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxOpenFoodFactsClient(
        base_url="https://off.test", http_client=async_client
    )

    search = asyncio.run(client.search_products("oats", page_size=5))
    product = asyncio.run(client.get_product("123"))

    assert search == {"products": []}
    assert product["status"] == 1
    assert seen[0].url.params["search_terms"] == "oats"
    assert seen[0].url.params["page_size"] == "5"
    assert seen[0].url.params["json"] == "1"
    assert seen[1].url.path == "/api/v2/product/123.json"


def test_open_food_facts_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "boom"})

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxOpenFoodFactsClient(
        base_url="https://off.test", http_client=async_client
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.get_product("123"))


def test_open_food_facts_create_sets_user_agent() -> None:
    client = HttpxOpenFoodFactsClient.create("https://off.test/")

    assert client.base_url == "https://off.test"
    assert client.http_client.headers["User-Agent"].startswith("fitness-tracker/")
    asyncio.run(client.close())
