"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from dog_gallery.adapters.dog_api_client import DogApiClient
from dog_gallery.api.app import create_app
from dog_gallery.config import Settings
from dog_gallery.containers import AppContainer
from dog_gallery.domain.errors import DataStoreError
from dog_gallery.domain.models import SavedImageRecord, UserRecord
from dog_gallery.services.images import SavedImageRepository, SavedImageService
from dog_gallery.services.random_images import RandomImageService
from dog_gallery.services.sessions import InMemorySessionStore
from dog_gallery.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[str, UserRecord] = field(default_factory=dict)
    fail: bool = False

    def get_by_username(self, username: str) -> UserRecord | None:
        if self.fail:
            raise DataStoreError("store down")
        return self.users.get(username)

    def create_user(self, username: str) -> UserRecord:
        if self.fail:
            raise DataStoreError("store down")
        user = UserRecord(
            id=uuid4().hex[:24], username=username, created_at=datetime.now(tz=UTC)
        )
        self.users[username] = user
        return user


@dataclass
class InMemorySavedImageRepository(SavedImageRepository):
    """In-memory saved image repository with a controllable clock."""

    images: list[SavedImageRecord] = field(default_factory=list)
    fail: bool = False
    clock: datetime = field(default_factory=lambda: datetime(2024, 1, 1, tzinfo=UTC))

    def create_image(self, user_id: str, image_url: str) -> SavedImageRecord:
        if self.fail:
            raise DataStoreError("store down")
        self.clock += timedelta(seconds=1)
        image = SavedImageRecord(
            id=uuid4().hex[:24],
            user_id=user_id,
            image_url=image_url,
            saved_at=self.clock,
        )
        self.images.append(image)
        return image

    def list_images(self, user_id: str) -> list[SavedImageRecord]:
        if self.fail:
            raise DataStoreError("store down")
        owned = [image for image in self.images if image.user_id == user_id]
        return sorted(owned, key=lambda image: image.saved_at, reverse=True)


@dataclass
class FakeDogApiClient(DogApiClient):
    """Fake provider returning queued payloads or raising queued errors."""

    responses: list[object] = field(default_factory=list)
    calls: int = 0

    async def fetch_random_image(self) -> object:
        self.calls += 1
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def settings() -> Settings:
    return Settings(
        mongo_connection_string="mongodb://localhost:27017/dog_gallery_test",
        session_secret="test-secret",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def image_repository() -> InMemorySavedImageRepository:
    return InMemorySavedImageRepository()


@pytest.fixture
def dog_api_client() -> FakeDogApiClient:
    return FakeDogApiClient()


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    image_repository: InMemorySavedImageRepository,
    dog_api_client: FakeDogApiClient,
) -> AppContainer:
    def init_store() -> None:
        return None

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=UserService(user_repository),
        saved_image_service=SavedImageService(image_repository),
        random_image_service=RandomImageService(dog_api_client),
        session_store=InMemorySessionStore(),
        init_store=init_store,
        close_resources=close_resources,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container), follow_redirects=False)


@pytest.fixture
def login(client: TestClient):
    """Return a helper that logs the test client in."""

    def _login(username: str = "alice") -> None:
        response = client.post("/login", data={"username": username})
        assert response.status_code == 302
        assert response.headers["location"] == "/home"

    return _login
