"""Nutritionix track API client."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

import httpx


class NutritionixClient(Protocol):
    """Interface for Nutritionix instant search and nutrient lookup."""

    async def search_instant(
        self, query: str, *, timeout: float = 15.0
    ) -> dict[str, object]:
        """Run an instant search and return raw API data."""

    async def natural_nutrients(
        self, food_names: Sequence[str], *, timeout: float = 15.0
    ) -> dict[str, object]:
        """Fetch full nutrients for a list of common food names."""


@dataclass
class HttpxNutritionixClient(NutritionixClient):
    """HTTPX-backed Nutritionix client."""

    app_id: str
    app_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, app_id: str, app_key: str, base_url: str
    ) -> "HttpxNutritionixClient":
        """Create a Nutritionix client with a managed httpx session."""
        return cls(
            app_id=app_id,
            app_key=app_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
        )

    async def search_instant(
        self, query: str, *, timeout: float = 15.0
    ) -> dict[str, object]:
        """Search common and branded foods."""
        response = await self.http_client.get(
            f"{self.base_url}/search/instant",
            params={"query": query},
            headers=self._headers(),
            timeout=timeout,
        )
        response.raise_for_status()
        return response.json()

    async def natural_nutrients(
        self, food_names: Sequence[str], *, timeout: float = 15.0
    ) -> dict[str, object]:
        """Resolve common food names to full nutrient profiles."""
        response = await self.http_client.post(
            f"{self.base_url}/natural/nutrients",
            json={"query": ", ".join(food_names)},
            headers=self._headers(),
            timeout=timeout,
        )
        response.raise_for_status()
        return response.json()

    def _headers(self) -> dict[str, str]:
        return {"x-app-id": self.app_id, "x-app-key": self.app_key}

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
