"""MongoDB connection helpers."""

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from dog_gallery.domain.errors import DataStoreError


def create_mongo_client(connection_string: str) -> MongoClient:
    """Create a lazily-connecting client with timezone-aware datetimes."""
    return MongoClient(
        connection_string,
        tz_aware=True,
        serverSelectionTimeoutMS=5000,
    )


def check_connection(client: MongoClient) -> None:
    """Round-trip a ping so startup fails fast on an unreachable server."""
    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        raise DataStoreError("MongoDB is unreachable") from exc


def to_object_id(value: str) -> ObjectId:
    """Parse a string id, mapping malformed ids to DataStoreError."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise DataStoreError(f"Invalid document id: {value!r}") from exc
