"""FastAPI application factory."""

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campus.application.config import ConfigError, load_config, seed_campus
from campus.web.dependencies import get_service_factory
from campus.web.exceptions import register_exception_handlers
from campus.web.routers import buildings_router, doors_router, passages_router

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CAMPUS_CONFIG"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Seed the campus from the file named by CAMPUS_CONFIG, if set."""
    config_path = os.environ.get(CONFIG_ENV_VAR)
    if config_path:
        try:
            config = load_config(Path(config_path))
        except ConfigError as e:
            logger.error(f"Cannot load {CONFIG_ENV_VAR}={config_path}: {e}")
            raise
        factory_provider = app.dependency_overrides.get(
            get_service_factory, get_service_factory
        )
        errors = await seed_campus(config, factory_provider())
        for error in errors:
            logger.warning(f"Seed item rejected: {error}")
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Campus Passages API",
        description="REST API for passages between campus buildings",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS middleware for browser access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(passages_router, prefix="/api/v1")
    app.include_router(doors_router, prefix="/api/v1")
    app.include_router(buildings_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
