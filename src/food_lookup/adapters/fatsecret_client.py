"""FatSecret Platform API client."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol

import httpx

_TOKEN_REFRESH_MARGIN = timedelta(seconds=60)
_DEFAULT_TOKEN_LIFETIME_SECONDS = 86400
_MAX_RESULTS = 50


class FatSecretClient(Protocol):
    """Interface for FatSecret food search."""

    async def search_foods(
        self, query: str, max_results: int = 25, *, timeout: float = 15.0
    ) -> dict[str, object]:
        """Search foods and return raw API data."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class HttpxFatSecretClient(FatSecretClient):
    """HTTPX-backed FatSecret client using OAuth2 client credentials."""

    client_id: str
    client_secret: str
    token_url: str
    api_url: str
    http_client: httpx.AsyncClient
    clock: Callable[[], datetime] = _utc_now
    _token: str | None = field(default=None, init=False)
    _token_expires_at: datetime | None = field(default=None, init=False)

    @classmethod
    def create(
        cls, client_id: str, client_secret: str, token_url: str, api_url: str
    ) -> "HttpxFatSecretClient":
        """Create a FatSecret client with a managed httpx session."""
        return cls(
            client_id=client_id,
            client_secret=client_secret,
            token_url=token_url,
            api_url=api_url,
            http_client=httpx.AsyncClient(),
        )

    async def search_foods(
        self, query: str, max_results: int = 25, *, timeout: float = 15.0
    ) -> dict[str, object]:
        """Search foods with the v4 search method."""
        token = await self._access_token(timeout)
        response = await self.http_client.post(
            self.api_url,
            headers={"Authorization": f"Bearer {token}"},
            data={
                "method": "foods.search.v4",
                "search_expression": query,
                "max_results": str(min(max_results, _MAX_RESULTS)),
                "page_number": "0",
                "format": "json",
                "flag_default_serving": "true",
            },
            timeout=timeout,
        )
        if response.status_code == httpx.codes.UNAUTHORIZED:
            self._token = None
            self._token_expires_at = None
        response.raise_for_status()
        return response.json()

    async def _access_token(self, timeout: float) -> str:
        now = self.clock()
        if (
            self._token
            and self._token_expires_at
            and now < self._token_expires_at - _TOKEN_REFRESH_MARGIN
        ):
            return self._token
        response = await self.http_client.post(
            self.token_url,
            auth=(self.client_id, self.client_secret),
            data={"grant_type": "client_credentials", "scope": "basic"},
            timeout=timeout,
        )
        response.raise_for_status()
        payload = response.json()
        self._token = str(payload["access_token"])
        lifetime = int(payload.get("expires_in") or _DEFAULT_TOKEN_LIFETIME_SECONDS)
        self._token_expires_at = now + timedelta(seconds=lifetime)
        return self._token

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
