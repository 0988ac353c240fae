"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from xns import __version__
from xns.api.routes import health_router, resolve_router
from xns.config import XnsSettings, get_settings
from xns.resolution.engine import XnsResolver

logger = logging.getLogger(__name__)


def configure_logging(settings: XnsSettings) -> None:
    """Apply the configured level to the package logger."""
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.getLogger("xns").setLevel(level)


def create_app(
    settings: XnsSettings | None = None,
    *,
    title: str = "XNS Resolver API",
    description: str = "Resolve .xrp domains on the XRP Ledger",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Resolver settings. Loaded from environment if omitted.
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Create the shared resolver on startup and close it on shutdown."""
        configure_logging(settings)

        logger.info(f"Initializing resolver for {settings.network.value}...")
        app.state.resolver = XnsResolver.from_settings(settings)
        logger.info("Application startup complete")

        yield

        logger.info("Shutting down application...")
        await app.state.resolver.close()
        app.state.resolver = None
        logger.info("Application shutdown complete")

    app = FastAPI(
        title=title,
        description=description,
        version=__version__,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(resolve_router, prefix="/api/v1")

    return app


def run() -> None:
    """Serve the API with uvicorn. Entry point for the ``xns-api`` script."""
    # uvicorn ships with the optional server extra
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
