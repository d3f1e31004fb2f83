"""USDA FoodData Central API client."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

import httpx


class FdcClient(Protocol):
    """Interface for FoodData Central API interactions."""

    async def search_foods(  # noqa: PLR0913
        self,
        query: str,
        page_size: int = 25,
        *,
        data_types: Sequence[str] | None = None,
        nutrient_numbers: Sequence[str] | None = None,
        timeout: float = 15.0,
    ) -> dict[str, object]:
        """Search foods by query and return raw API data."""


@dataclass
class HttpxFdcClient(FdcClient):
    """HTTPX-backed FDC client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxFdcClient":
        """Create an FDC client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def search_foods(  # noqa: PLR0913
        self,
        query: str,
        page_size: int = 25,
        *,
        data_types: Sequence[str] | None = None,
        nutrient_numbers: Sequence[str] | None = None,
        timeout: float = 15.0,
    ) -> dict[str, object]:
        """Search foods by query."""
        payload: dict[str, object] = {
            "query": query,
            "pageSize": page_size,
            "pageNumber": 1,
        }
        if data_types:
            payload["dataType"] = list(data_types)
        if nutrient_numbers:
            payload["nutrientNumbers"] = list(nutrient_numbers)
            payload["sortBy"] = "dataType.keyword"
            payload["sortOrder"] = "asc"
        response = await self.http_client.post(
            f"{self.base_url}/foods/search",
            params={"api_key": self.api_key},
            json=payload,
            timeout=timeout,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
