"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.exceptions import StorefrontError
from shared.logging_config import configure_logging
from modules.auth.routes import router as auth_router
from modules.catalog.routes import router as catalog_router
from modules.content.routes import router as content_router

from .dependencies import get_container
from .middleware.errors import register_exception_handlers
from .routes import health

logger = logging.getLogger(__name__)


async def seed_demo_account() -> None:
    """Create the configured demo login, if any."""
    settings = get_settings()
    if not (settings.demo_account_email and settings.demo_account_password):
        return
    try:
        account = await get_container().auth.seed_account(
            settings.demo_account_email,
            settings.demo_account_password,
        )
    except StorefrontError as e:
        logger.warning(f"Demo account not seeded: {e.message}")
        return
    if account:
        logger.info(f"Seeded demo account {account.email}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    await seed_demo_account()
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Storefront backend: accounts, sessions, cached catalog and product content",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(catalog_router, prefix="/api", tags=["catalog"])
    app.include_router(content_router, prefix="/api/gemini", tags=["content"])

    return app


# Application instance for uvicorn
app = create_app()
