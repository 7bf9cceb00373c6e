"""MongoDB-backed user repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from dog_gallery.domain.errors import DataStoreError
from dog_gallery.domain.models import UserRecord
from dog_gallery.services.users import UserRepository


@dataclass
class MongoUserRepository(UserRepository):
    """MongoDB implementation for user persistence."""

    collection: Collection

    def ensure_indexes(self) -> None:
        """Create the unique username index."""
        try:
            self.collection.create_index("username", unique=True)
        except PyMongoError as exc:
            raise DataStoreError("Failed to create user indexes") from exc

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for an exact username, if present."""
        try:
            document = self.collection.find_one({"username": username})
        except PyMongoError as exc:
            raise DataStoreError("Failed to look up user") from exc
        if document is None:
            return None
        return _to_user(document)

    def create_user(self, username: str) -> UserRecord:
        """Insert a new user document and return it."""
        document = {"username": username, "createdAt": datetime.now(tz=UTC)}
        try:
            result = self.collection.insert_one(document)
        except DuplicateKeyError:
            # Lost a race with a concurrent login for the same name.
            existing = self.get_by_username(username)
            if existing is None:
                raise DataStoreError("Failed to create user") from None
            return existing
        except PyMongoError as exc:
            raise DataStoreError("Failed to create user") from exc
        return UserRecord(
            id=str(result.inserted_id),
            username=username,
            created_at=document["createdAt"],
        )


def _to_user(document: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=str(document["_id"]),
        username=str(document["username"]),
        created_at=document["createdAt"],  # type: ignore[arg-type]
    )
