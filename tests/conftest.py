"""
Pytest configuration and fixtures.

Storage fixtures come in two flavours: an in-memory store and a
DatabaseStorage over in-memory SQLite. ``storage`` is parametrized over
both so contract tests run against every backend.
"""

import pytest
from fastapi.testclient import TestClient

from core.analysis import KeywordAnalysisProvider
from database.database import build_engine, build_session_factory, init_db
from storage import MemStorage
from storage.database import DatabaseStorage
from web.backend.app import create_app
from tests.fixtures.seed_data import seed_storage


@pytest.fixture
def mem_storage():
    return MemStorage()


@pytest.fixture
def db_storage():
    engine = build_engine("sqlite:///:memory:")
    init_db(engine)
    yield DatabaseStorage(build_session_factory(engine))
    engine.dispose()


@pytest.fixture(params=[
    "memory",
    pytest.param("database", marks=pytest.mark.db),
])
def storage(request):
    """Each storage backend in turn."""
    return request.getfixturevalue("db_storage" if request.param == "database" else "mem_storage")


@pytest.fixture
def seeded_storage(mem_storage):
    """MemStorage holding one job description, one resume and one analysis result."""
    seed_storage(mem_storage)
    return mem_storage


@pytest.fixture
def provider():
    return KeywordAnalysisProvider()


@pytest.fixture
def client(seeded_storage, provider):
    app = create_app(storage=seeded_storage, provider=provider)
    return TestClient(app, raise_server_exceptions=False)
