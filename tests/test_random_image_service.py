"""Tests for the random image service."""

import asyncio

import httpx
import pytest

from dog_gallery.domain.errors import ImageProviderError
from dog_gallery.services.random_images import RandomImageService


def test_fetch_image_url_returns_message(dog_api_client) -> None:
    dog_api_client.responses.append(
        {"message": "https://images.dog.ceo/breeds/hound/1.jpg", "status": "success"}
    )
    service = RandomImageService(dog_api_client)

    url = asyncio.run(service.fetch_image_url())

    assert url == "https://images.dog.ceo/breeds/hound/1.jpg"


@pytest.mark.parametrize(
    "payload",
    [
        {"status": "success"},
        {"message": ""},
        {"message": 42},
        ["https://x/a.jpg"],
        None,
    ],
)
def test_fetch_image_url_rejects_malformed_payload(dog_api_client, payload) -> None:
    dog_api_client.responses.append(payload)
    service = RandomImageService(dog_api_client)

    with pytest.raises(ImageProviderError):
        asyncio.run(service.fetch_image_url())


def test_fetch_image_url_wraps_bad_status(dog_api_client) -> None:
    request = httpx.Request("GET", "https://dog.ceo/api/breeds/image/random")
    response = httpx.Response(503, request=request)
    dog_api_client.responses.append(
        httpx.HTTPStatusError("unavailable", request=request, response=response)
    )
    service = RandomImageService(dog_api_client)

    with pytest.raises(ImageProviderError, match="503"):
        asyncio.run(service.fetch_image_url())


def test_fetch_image_url_wraps_transport_errors(dog_api_client) -> None:
    dog_api_client.responses.append(httpx.ConnectError("refused"))
    service = RandomImageService(dog_api_client)

    with pytest.raises(ImageProviderError):
        asyncio.run(service.fetch_image_url())


def test_fetch_image_url_wraps_invalid_json(dog_api_client) -> None:
    dog_api_client.responses.append(ValueError("Expecting value"))
    service = RandomImageService(dog_api_client)

    with pytest.raises(ImageProviderError):
        asyncio.run(service.fetch_image_url())
