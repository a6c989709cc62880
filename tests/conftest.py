import pytest

from shopify_schema_generator.repository import ProjectRepository
from shopify_schema_generator.storage import MemoryStorage


class FixedClock:
    """Returns a caller-controlled timestamp for lastModified."""

    def __init__(self, value="2024-01-01T00:00:00.000Z"):
        self.value = value

    def __call__(self):
        return self.value


@pytest.fixture()
def storage():
    return MemoryStorage()


@pytest.fixture()
def clock():
    return FixedClock()


@pytest.fixture()
def repository(storage, clock):
    return ProjectRepository(storage, clock=clock)


@pytest.fixture(autouse=True)
def no_status_delay(monkeypatch):
    """Status messages clear immediately so generator handlers never sleep."""
    monkeypatch.setattr("shopify_schema_generator.config.settings.status_clear_seconds", 0)
