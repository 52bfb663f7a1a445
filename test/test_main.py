"""
Test-specific FastAPI Application

Same routes as production without tracing export. Uses shared app factory
for common setup.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    """Minimal lifespan: tables, default categories and DI wiring."""
    Logger.base.info('🧪 [Test App] Starting up...')

    await create_db_and_tables()
    Logger.base.info('🗄️  [Test App] Database tables created')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Test App] Dependency injection wired')

    await container.category_repo().ensure_defaults()

    Logger.base.info('✅ [Test App] Startup complete')

    yield

    Logger.base.info('🛑 [Test App] Shutting down...')
    await dispose_engine()
    cleanup()
    container.unwire()
    Logger.base.info('👋 [Test App] Shutdown complete')


app = create_app(lifespan=lifespan_for_tests, title_suffix=' (Test)')
