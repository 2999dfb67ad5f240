#!/usr/bin/env python3
"""
Resume Match API - FastAPI Application

Stores resumes and job descriptions, matches them, and generates interview
questions, with automatic API documentation.

Usage:
    python -m web.backend.app

Then open:
    - http://localhost:5000/api/health - Health check (port configurable in config.yaml)
    - http://localhost:5000/docs - API Documentation (Swagger UI)
    - http://localhost:5000/redoc - Alternative API Documentation
"""

import logging
from typing import Optional

from fastapi import FastAPI

from core.analysis import AnalysisProvider
from storage import Storage
from .config import get_config
from .dependencies import get_storage, get_analysis_provider
from .exceptions import register_exception_handlers
from .routers import (
    health_router,
    job_descriptions_router,
    resumes_router,
    analysis_router
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(
    storage: Optional[Storage] = None,
    provider: Optional[AnalysisProvider] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        storage: Storage to serve from instead of the configured one.
        provider: Analysis provider to use instead of the configured one.

    Returns:
        The configured FastAPI app.
    """
    app = FastAPI(
        title="Resume Match API",
        description="API for storing resumes and job descriptions and matching them",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(job_descriptions_router)
    app.include_router(resumes_router)
    app.include_router(analysis_router)

    if storage is not None:
        app.dependency_overrides[get_storage] = lambda: storage
    if provider is not None:
        app.dependency_overrides[get_analysis_provider] = lambda: provider

    return app


app = create_app()


def main():
    """Run the web server."""
    import uvicorn

    config = get_config()
    logger.info(f"Starting Resume Match API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
