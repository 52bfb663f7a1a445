"""
EcoFinds FastAPI Application

Catalog, cart, favorites and the checkout coordinator behind one HTTP service.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [EcoFinds] Starting up...')

    tracing = TracingConfig()
    tracing.setup()
    Logger.base.info('📊 [EcoFinds] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [EcoFinds] Dependency injection wired')

    tracing.instrument_sqlalchemy(engine=get_engine())
    Logger.base.info('🗄️  [EcoFinds] Database engine ready + instrumented')

    # Schema comes from alembic, default categories are re-ensured for fresh databases
    inserted = await container.category_repo().ensure_defaults()
    if inserted:
        Logger.base.info(f'🏷️  [EcoFinds] Seeded {inserted} default categories')

    Logger.base.info('✅ [EcoFinds] Ready to serve requests')

    yield

    Logger.base.info('🛑 [EcoFinds] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [EcoFinds] Database engine disposed')

    tracing.shutdown()
    Logger.base.info('📊 [EcoFinds] Tracing shutdown complete')

    cleanup()
    container.unwire()

    Logger.base.info('👋 [EcoFinds] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
