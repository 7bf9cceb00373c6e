"""MongoDB-backed saved image repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from dog_gallery.adapters.mongo_store import to_object_id
from dog_gallery.domain.errors import DataStoreError
from dog_gallery.domain.models import SavedImageRecord
from dog_gallery.services.images import SavedImageRepository


@dataclass
class MongoSavedImageRepository(SavedImageRepository):
    """MongoDB implementation for saved images."""

    collection: Collection

    def ensure_indexes(self) -> None:
        """Create the per-user listing index."""
        try:
            self.collection.create_index([("user", ASCENDING), ("savedAt", DESCENDING)])
        except PyMongoError as exc:
            raise DataStoreError("Failed to create image indexes") from exc

    def create_image(self, user_id: str, image_url: str) -> SavedImageRecord:
        """Insert a saved image document and return it."""
        document = {
            "user": to_object_id(user_id),
            "imageUrl": image_url,
            "savedAt": datetime.now(tz=UTC),
        }
        try:
            result = self.collection.insert_one(document)
        except PyMongoError as exc:
            raise DataStoreError("Failed to save image") from exc
        return SavedImageRecord(
            id=str(result.inserted_id),
            user_id=user_id,
            image_url=image_url,
            saved_at=document["savedAt"],
        )

    def list_images(self, user_id: str) -> list[SavedImageRecord]:
        """Return a user's images sorted by savedAt, newest first."""
        try:
            cursor = self.collection.find({"user": to_object_id(user_id)}).sort(
                "savedAt", DESCENDING
            )
            documents = list(cursor)
        except PyMongoError as exc:
            raise DataStoreError("Failed to load saved images") from exc
        return [
            SavedImageRecord(
                id=str(document["_id"]),
                user_id=str(document["user"]),
                image_url=document["imageUrl"],
                saved_at=document["savedAt"],
            )
            for document in documents
        ]
