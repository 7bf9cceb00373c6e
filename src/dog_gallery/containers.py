"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from dog_gallery.adapters.dog_api_client import HttpxDogApiClient
from dog_gallery.adapters.mongo_saved_image_repository import (
    MongoSavedImageRepository,
)
from dog_gallery.adapters.mongo_store import check_connection, create_mongo_client
from dog_gallery.adapters.mongo_user_repository import MongoUserRepository
from dog_gallery.config import Settings
from dog_gallery.services.images import SavedImageService
from dog_gallery.services.random_images import RandomImageService
from dog_gallery.services.sessions import InMemorySessionStore, SessionStore
from dog_gallery.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    saved_image_service: SavedImageService
    random_image_service: RandomImageService
    session_store: SessionStore
    init_store: Callable[[], None]
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    mongo_client = create_mongo_client(resolved_settings.mongo_connection_string)
    database = mongo_client.get_default_database(
        default=resolved_settings.default_database
    )
    user_repository = MongoUserRepository(database["users"])
    image_repository = MongoSavedImageRepository(database["images"])
    dog_api_client = HttpxDogApiClient.create(resolved_settings.dog_api_url)

    def init_store() -> None:
        check_connection(mongo_client)
        user_repository.ensure_indexes()
        image_repository.ensure_indexes()

    async def close_resources() -> None:
        await dog_api_client.close()
        mongo_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(user_repository),
        saved_image_service=SavedImageService(image_repository),
        random_image_service=RandomImageService(dog_api_client),
        session_store=InMemorySessionStore(
            idle_ttl_seconds=resolved_settings.session_idle_ttl_seconds
        ),
        init_store=init_store,
        close_resources=close_resources,
    )
