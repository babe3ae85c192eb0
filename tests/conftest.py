"""Shared test fixtures and configuration."""

from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from search_server.config import Settings
from search_server.domain.model import DocumentStatus
from search_server.search_server import SearchServer


# Test environment that pins every setting the engine reads
TEST_ENV = {
    "SEARCH_SERVER_MAX_RESULT_DOCUMENT_COUNT": "5",
    "SEARCH_SERVER_RELEVANCE_EPSILON": "1e-6",
    "SEARCH_SERVER_STOP_WORDS": "",
    "SEARCH_SERVER_LOG_LEVEL": "info",
    "SEARCH_SERVER_LOG_JSON": "false",
    "SEARCH_SERVER_TRACING_ENABLED": "true",
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Set test defaults for every SEARCH_SERVER_* variable before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def server(settings: Settings) -> SearchServer:
    return SearchServer(settings=settings, name="test")


@pytest.fixture
def city_server(server: SearchServer) -> SearchServer:
    """Five ACTUAL documents, three of which contain ``city``."""
    ratings = [1, 2, 3]
    server.add_document(0, "cat in the big city", DocumentStatus.ACTUAL, ratings)
    server.add_document(1, "big developer in the big city", DocumentStatus.ACTUAL, ratings)
    server.add_document(2, "dog city", DocumentStatus.ACTUAL, ratings)
    server.add_document(3, "empty document", DocumentStatus.ACTUAL, ratings)
    server.add_document(4, "no text!!!!!!!!", DocumentStatus.ACTUAL, ratings)
    return server
