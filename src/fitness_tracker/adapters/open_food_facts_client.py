"""Open Food Facts API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

USER_AGENT = "fitness-tracker/0.1"


class OpenFoodFactsClient(Protocol):
    """Interface for Open Food Facts API interactions."""

    async def search_products(
        self, query: str, page_size: int = 20
    ) -> dict[str, object]:
        """Search products by name and return raw API data."""

    async def get_product(self, barcode: str) -> dict[str, object]:
        """Fetch a product by barcode and return raw API data."""


@dataclass
class HttpxOpenFoodFactsClient(OpenFoodFactsClient):
    """HTTPX-backed Open Food Facts client."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxOpenFoodFactsClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(headers={"User-Agent": USER_AGENT}),
        )

    async def search_products(
        self, query: str, page_size: int = 20
    ) -> dict[str, object]:
        """Search products by name."""
        response = await self.http_client.get(
            f"{self.base_url}/cgi/search.pl",
            params={
                "search_terms": query,
                "search_simple": 1,
                "action": "process",
                "json": 1,
                "page_size": page_size,
            },
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def get_product(self, barcode: str) -> dict[str, object]:
        """Fetch a product by barcode."""
        response = await self.http_client.get(
            f"{self.base_url}/api/v2/product/{barcode}.json",
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
