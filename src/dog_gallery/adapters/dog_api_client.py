"""dog.ceo random image API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class DogApiClient(Protocol):
    """Interface for the random dog image provider."""

    async def fetch_random_image(self) -> object:
        """Fetch a random image and return the decoded JSON body."""


@dataclass
class HttpxDogApiClient(DogApiClient):
    """HTTPX-backed dog.ceo client."""

    url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, url: str) -> "HttpxDogApiClient":
        """Create a client with a managed httpx session."""
        return cls(url=url, http_client=httpx.AsyncClient())

    async def fetch_random_image(self) -> object:
        """Call the random image endpoint."""
        response = await self.http_client.get(self.url, timeout=10)
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
