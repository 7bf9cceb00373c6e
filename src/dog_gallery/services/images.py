"""Saved image business logic."""

from dataclasses import dataclass
from typing import Protocol

from dog_gallery.domain.models import SavedImageRecord


class SavedImageRepository(Protocol):
    """Persistence interface for saved images."""

    def create_image(self, user_id: str, image_url: str) -> SavedImageRecord:
        """Create and return a saved image record."""

    def list_images(self, user_id: str) -> list[SavedImageRecord]:
        """Return a user's saved images, newest first."""


@dataclass
class SavedImageService:
    """Application service for a user's saved image list."""

    repository: SavedImageRepository

    def save_image(self, user_id: str, image_url: str) -> SavedImageRecord:
        """Persist an image for the user."""
        return self.repository.create_image(user_id=user_id, image_url=image_url)

    def list_saved(self, user_id: str) -> list[SavedImageRecord]:
        """Return the user's saved images ordered by save time, newest first."""
        return self.repository.list_images(user_id)
