"""ASGI factory for serving the dog gallery without the console controller.

Run with ``uvicorn dog_gallery.api.asgi:get_app --factory``; settings are read
when the server calls the factory, not at import time.
"""

from fastapi import FastAPI

from dog_gallery.api.app import create_app
from dog_gallery.config import Settings
from dog_gallery.containers import build_container


def get_app(settings: Settings | None = None) -> FastAPI:
    """Build an app that prepares and closes its own resources."""
    return create_app(build_container(settings), manage_resources=True)
