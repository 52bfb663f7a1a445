"""
Test Configuration and Fixtures

This module provides:
- A throwaway SQLite database (aiosqlite) created once per session
- Table cleanup between integration tests
- The session-scoped TestClient and logged-in user fixtures

Architecture:
- Unit tests (test/**/unit/): Override fixtures with no-ops in their own conftest.py
- Integration tests: Drive the HTTP API against the real schema with cleanup
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time, so DATABASE_URL must be set first
# =============================================================================
import os
from pathlib import Path


TEST_DIR = Path(__file__).parent
TEST_DB_PATH = TEST_DIR / 'test_ecofinds.db'
TEST_UPLOAD_DIR = TEST_DIR / 'test_uploads'


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{TEST_DB_PATH}'

    test_log_dir = TEST_DIR / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['UPLOAD_DIR'] = str(TEST_UPLOAD_DIR)

    # Cheap hashing keeps the auth-heavy suites fast
    os.environ.setdefault('BCRYPT_ROUNDS', '4')


_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import AsyncGenerator, Generator  # noqa: E402
import shutil  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import delete  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from src.platform.config.core_setting import settings  # noqa: E402
from src.platform.database.orm_db_setting import Base  # noqa: E402
import src.service.marketplace.driven_adapter.model  # noqa: E402, F401
from test.shared.utils import register_user  # noqa: E402
from test.util_constant import (  # noqa: E402
    ANOTHER_BUYER_EMAIL,
    ANOTHER_BUYER_USERNAME,
    DEFAULT_PASSWORD,
    TEST_BUYER_EMAIL,
    TEST_BUYER_USERNAME,
    TEST_SELLER_EMAIL,
    TEST_SELLER_USERNAME,
)


# Cleared between tests, category is kept since it is seeded once
_CLEANUP_TABLES = ('product_view', 'favorite', 'purchase', 'cart_entry', 'product', 'user')


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_sessionstart(session: pytest.Session) -> None:
    asyncio.run(_setup_test_database())


def pytest_sessionfinish(session: pytest.Session, exitstatus: int) -> None:
    TEST_DB_PATH.unlink(missing_ok=True)
    shutil.rmtree(TEST_UPLOAD_DIR, ignore_errors=True)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            # First, so user fixtures are created on clean tables
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
async def _setup_test_database() -> None:
    TEST_DB_PATH.unlink(missing_ok=True)
    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await engine.dispose()


async def _clean_all_tables() -> None:
    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with engine.begin() as conn:
            for table_name in _CLEANUP_TABLES:
                await conn.execute(delete(Base.metadata.tables[table_name]))
    finally:
        await engine.dispose()


@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await _clean_all_tables()
    yield


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clear_client_cookies(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    # Skip for unit tests - they don't use the HTTP client
    if 'unit' in [m.name for m in request.node.iter_markers()]:
        yield
        return
    client = request.getfixturevalue('client')
    client.cookies.clear()
    yield
    client.cookies.clear()


# =============================================================================
# User Fixtures (function scope, tables are wiped between tests)
# =============================================================================
@pytest.fixture
def seller_user(client: TestClient) -> dict[str, Any]:
    return register_user(client, TEST_SELLER_USERNAME, TEST_SELLER_EMAIL, DEFAULT_PASSWORD)


@pytest.fixture
def buyer_user(client: TestClient) -> dict[str, Any]:
    return register_user(client, TEST_BUYER_USERNAME, TEST_BUYER_EMAIL, DEFAULT_PASSWORD)


@pytest.fixture
def another_buyer_user(client: TestClient) -> dict[str, Any]:
    return register_user(client, ANOTHER_BUYER_USERNAME, ANOTHER_BUYER_EMAIL, DEFAULT_PASSWORD)
