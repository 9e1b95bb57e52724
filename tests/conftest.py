"""Pytest fixtures for testing."""
from collections.abc import AsyncGenerator
from datetime import UTC, datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from core.config import Settings
from services.memory_storage import MemoryStorage

AI_BASE_URL = "https://ai.test/v1"
AI_API_KEY = "sk-test-key"


class TickingClock:
    """
    Deterministic clock for the store.

    Every call advances time by `step`, so consecutive writes get distinct,
    ordered timestamps. advance() jumps forward without returning.
    """

    def __init__(
        self,
        start: datetime | None = None,
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.current = start or datetime.now(UTC)
        self.step = step

    def __call__(self) -> datetime:
        self.current += self.step
        return self.current

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward by delta."""
        self.current += delta


@pytest.fixture
def clock() -> TickingClock:
    """A clock starting at the current time."""
    return TickingClock()


@pytest.fixture
def storage(clock: TickingClock) -> MemoryStorage:
    """Fresh, empty store per test (no seeded categories)."""
    return MemoryStorage(seed_defaults=False, clock=clock)


@pytest.fixture
def app_settings() -> Settings:
    """Settings with the AI provider not configured."""
    return Settings(
        _env_file=None,
        AI_INTEGRATIONS_OPENAI_BASE_URL="",
        AI_INTEGRATIONS_OPENAI_API_KEY="",
    )


@pytest.fixture
def ai_settings() -> Settings:
    """Settings with the AI provider configured."""
    return Settings(
        _env_file=None,
        AI_INTEGRATIONS_OPENAI_BASE_URL=AI_BASE_URL,
        AI_INTEGRATIONS_OPENAI_API_KEY=AI_API_KEY,
    )


@pytest.fixture
async def client(
    storage: MemoryStorage,
    app_settings: Settings,
) -> AsyncGenerator[AsyncClient]:
    """Create a test client with storage and settings overrides."""
    from api.dependencies import get_storage
    from api.main import app
    from core.config import get_settings

    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_settings] = lambda: app_settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
