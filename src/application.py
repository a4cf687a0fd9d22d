"""FastAPI application factory and bootstrap helpers."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.errors import register_exception_handlers
from src.api.routes import include_api_routes
from src.config import settings
from src.infrastructure.database import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Dispose of the connection pool on shutdown."""
    logger.info("Starting catalog API (environment=%s)", settings.environment)
    yield
    await engine.dispose()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="SkiStore Catalog",
        description="Product catalog REST API",
        version="1.0.0",
        lifespan=lifespan,
    )

    _configure_cors(app)
    register_exception_handlers(app)
    include_api_routes(app)

    return app


def _configure_cors(app: FastAPI) -> None:
    """Allow the configured origins in non-production environments."""

    if settings.is_production:
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", "X-Total-Count"],
    )
