"""Domain models for the dog gallery."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: str
    username: str
    created_at: datetime


@dataclass(frozen=True)
class SavedImageRecord:
    """An image a user chose to keep."""

    id: str
    user_id: str
    image_url: str
    saved_at: datetime
