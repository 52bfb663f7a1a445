"""
Unit test configuration for the marketplace service.

Overrides fixtures from the parent conftest so pure unit tests never touch
the database or create the session-scoped TestClient.
"""

from collections.abc import AsyncGenerator, Generator
from unittest.mock import MagicMock

from fastapi.testclient import TestClient
import pytest

from test.service.marketplace.unit.in_memory_uow import InMemoryStore


@pytest.fixture(autouse=True, scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    """No-op override for unit tests - no real database needed"""
    yield


@pytest.fixture(scope='session')
def client() -> Generator[MagicMock, None, None]:
    """Mock client for unit tests - prevents TestClient/lifespan from being created"""
    yield MagicMock(spec=TestClient)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()
