"""Open Food Facts API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class OpenFoodFactsClient(Protocol):
    """Interface for Open Food Facts product search and lookup."""

    async def search_products(
        self, query: str, page_size: int = 25, *, timeout: float = 15.0
    ) -> dict[str, object]:
        """Run a text search and return raw API data."""

    async def get_product(
        self, barcode: str, *, timeout: float = 15.0
    ) -> dict[str, object] | None:
        """Fetch a product by barcode, or None when the API reports 404."""


@dataclass
class HttpxOpenFoodFactsClient(OpenFoodFactsClient):
    """HTTPX-backed Open Food Facts client."""

    base_url: str
    user_agent: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str, user_agent: str) -> "HttpxOpenFoodFactsClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url,
            user_agent=user_agent,
            http_client=httpx.AsyncClient(headers={"User-Agent": user_agent}),
        )

    async def search_products(
        self, query: str, page_size: int = 25, *, timeout: float = 15.0
    ) -> dict[str, object]:
        """Search products by free text, most scanned first."""
        response = await self.http_client.get(
            f"{self.base_url}/cgi/search.pl",
            params={
                "search_terms": query,
                "search_simple": 1,
                "action": "process",
                "json": 1,
                "page_size": page_size,
                "sort_by": "unique_scans_n",
            },
            timeout=timeout,
        )
        response.raise_for_status()
        return response.json()

    async def get_product(
        self, barcode: str, *, timeout: float = 15.0
    ) -> dict[str, object] | None:
        """Fetch a single product by barcode."""
        response = await self.http_client.get(
            f"{self.base_url}/api/v2/product/{barcode}.json",
            timeout=timeout,
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
