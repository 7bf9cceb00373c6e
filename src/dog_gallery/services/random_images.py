"""Random dog image lookups."""

import logging
from dataclasses import dataclass

import httpx

from dog_gallery.adapters.dog_api_client import DogApiClient
from dog_gallery.domain.errors import ImageProviderError

_logger = logging.getLogger(__name__)


@dataclass
class RandomImageService:
    """Fetches a random image URL from the upstream provider."""

    client: DogApiClient

    async def fetch_image_url(self) -> str:
        """Return a fresh image URL or raise ImageProviderError."""
        try:
            payload = await self.client.fetch_random_image()
        except httpx.HTTPStatusError as exc:
            raise ImageProviderError(
                f"Dog API returned status {exc.response.status_code}"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise ImageProviderError("Dog API request failed") from exc

        image_url = payload.get("message") if isinstance(payload, dict) else None
        if not isinstance(image_url, str) or not image_url.strip():
            raise ImageProviderError("Dog API response has no image URL")
        _logger.info("Fetched random image: %s", image_url)
        return image_url
