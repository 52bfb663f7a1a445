"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from pathlib import Path
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import HEALTH, METRICS, UPLOADS
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.observability.tracing import TracingConfig
from src.service.marketplace.driving_adapter.http_controller.auth_controller import (
    router as auth_router,
)
from src.service.marketplace.driving_adapter.http_controller.cart_controller import (
    router as cart_router,
)
from src.service.marketplace.driving_adapter.http_controller.category_controller import (
    router as category_router,
)
from src.service.marketplace.driving_adapter.http_controller.checkout_controller import (
    router as checkout_router,
)
from src.service.marketplace.driving_adapter.http_controller.favorite_controller import (
    router as favorite_router,
)
from src.service.marketplace.driving_adapter.http_controller.image_controller import (
    router as image_router,
)
from src.service.marketplace.driving_adapter.http_controller.product_controller import (
    router as product_router,
)
from src.service.marketplace.driving_adapter.http_controller.user_controller import (
    router as user_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'EcoFinds second-hand marketplace',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Auto-instrument FastAPI (must be done before mounting routes)
    TracingConfig.instrument_fastapi(app=app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    # Stored listing and profile images
    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    app.mount(UPLOADS, StaticFiles(directory=settings.UPLOAD_DIR), name='uploads')

    app.include_router(auth_router, prefix='/api/auth', tags=['auth'])
    app.include_router(user_router, prefix='/api/user', tags=['user'])
    app.include_router(category_router, prefix='/api/categories', tags=['category'])
    app.include_router(product_router, prefix='/api/products', tags=['product'])
    app.include_router(cart_router, prefix='/api/cart', tags=['cart'])
    app.include_router(favorite_router, prefix='/api/favorites', tags=['favorite'])
    app.include_router(checkout_router, prefix='/api', tags=['checkout'])
    app.include_router(image_router, prefix='/api', tags=['image'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register health and metrics endpoints."""

    @app.get(HEALTH)
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': 'EcoFinds Marketplace'}

    @app.get(METRICS)
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
