"""
Main FastAPI application entry point for the function index service.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import files_router, functions_router, health_router
from .core.config import Settings, configure_logging, get_settings
from .core.errors import IndexerError
from .core.indexer import Indexer

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    The project directory is indexed once on startup; the catalog is read-only
    while the application serves requests.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(f"Starting {settings.app_name} for {settings.project_dir}")
        
        indexer = Indexer(settings.project_dir)
        try:
            indexer.index()
        except IndexerError as e:
            logger.error(f"Failed to index project: {e}")
            raise
        
        app.state.indexer = indexer
        logger.info(f"Index ready: {indexer.stats().model_dump()}")
        
        yield
        
        # Shutdown
        app.state.indexer = None
        logger.info(f"Shutting down {settings.app_name}...")

    app = FastAPI(
        title=settings.app_name,
        description="Locates JavaScript function definitions across require() imports",
        version=__version__,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.indexer = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/health", tags=["health"])
    app.include_router(files_router, prefix="/files", tags=["files"])
    app.include_router(functions_router, prefix="/functions", tags=["functions"])

    @app.get("/", tags=["root"])
    async def root() -> Dict[str, Any]:
        """Root endpoint with system information."""
        return {
            "name": settings.app_name,
            "version": __version__,
            "project_dir": settings.project_dir,
            "docs": "/docs",
            "health": "/health"
        }

    return app


def build_app() -> FastAPI:
    """Factory used by uvicorn."""
    settings = get_settings()
    configure_logging(settings)
    return create_app(settings)
