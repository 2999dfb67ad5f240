#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

Storage and analysis provider are process-wide singletons built from config.
Tests replace them through ``app.dependency_overrides``.
"""

import logging
from functools import lru_cache

from core.analysis import AnalysisProvider, KeywordAnalysisProvider
from storage import Storage, MemStorage
from .config import AppConfig, get_config

logger = logging.getLogger(__name__)


def build_storage(config: AppConfig) -> Storage:
    """Build the configured Storage implementation."""
    if config.storage.backend == "database":
        from database.database import build_engine, build_session_factory, init_db
        from storage.database import DatabaseStorage

        engine = build_engine(config.database.url)
        if config.database.create_tables:
            init_db(engine)
        logger.info("Using database storage")
        return DatabaseStorage(build_session_factory(engine))

    logger.info("Using in-memory storage")
    return MemStorage()


def build_analysis_provider(config: AppConfig) -> AnalysisProvider:
    """Build the configured analysis provider."""
    if config.analysis.provider == "openai":
        from core.analysis.openai_provider import OpenAIAnalysisProvider

        logger.info(f"Using OpenAI analysis provider ({config.analysis.model})")
        return OpenAIAnalysisProvider(
            api_key=config.analysis.api_key,
            base_url=config.analysis.base_url,
            model=config.analysis.model,
            temperature=config.analysis.temperature,
        )

    logger.info("Using keyword analysis provider")
    return KeywordAnalysisProvider()


@lru_cache()
def get_storage() -> Storage:
    """
    FastAPI dependency that returns the shared Storage.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(storage: Storage = Depends(get_storage)):
            ...
    """
    return build_storage(get_config())


@lru_cache()
def get_analysis_provider() -> AnalysisProvider:
    """FastAPI dependency that returns the shared analysis provider."""
    return build_analysis_provider(get_config())
