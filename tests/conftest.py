"""Shared test fixtures and configuration."""

import os

import pytest


# Complete test environment that overrides every config value
TEST_ENV = {
    "TITLE_INDEX_SIMILARITY_BOOST_THRESHOLD": "0.7",
    "TITLE_INDEX_SIMILARITY_PREFIX_SIZE": "4",
    "TITLE_INDEX_DEFAULT_SEARCH_LIMIT": "10",
    "TITLE_INDEX_LOG_LEVEL": "info",
    "TITLE_INDEX_LOG_JSON": "true",
    "TITLE_INDEX_SERVICE_NAME": "title-index-tests",
}


# Set environment variables immediately when conftest.py is loaded
for key, value in TEST_ENV.items():
    os.environ[key] = value

# Now we can safely import config-dependent modules
from title_index import Document, new_index
from title_index.config import get_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset environment and cached settings before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def index():
    """Empty index with test settings."""
    return new_index(name="test")


@pytest.fixture
def movie_documents():
    """The three-title corpus used across search tests."""
    return [
        Document(title="Test Movie 1", payload="Details of Movie 1"),
        Document(title="Another Movie", payload="Details of Another Movie"),
        Document(title="Documentary", payload="Details of Documentary"),
    ]


@pytest.fixture
def movie_index(index, movie_documents):
    index.batch(movie_documents)
    return index
