"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol

from dog_gallery.domain.models import UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with this exact username, if present."""

    def create_user(self, username: str) -> UserRecord:
        """Create and return a new user record."""


@dataclass
class UserService:
    """Application service for username-only login."""

    repository: UserRepository

    def ensure_user(self, username: str) -> UserRecord:
        """Return the user for a username, creating it on first sight."""
        existing = self.repository.get_by_username(username)
        if existing:
            return existing
        return self.repository.create_user(username)
