"""Pytest configuration and shared fixtures.

This module provides centralized test fixtures for:
- HTTP client for API testing
- Sample documents in the shapes the built-in views read
- A clean view registry per test
"""

import copy

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from docviews.config import settings
from docviews.main import app
from docviews.projections.emitters import register_document_views
from docviews.projections.registry import ViewRegistry


# =============================================================================
# Sample Documents
# =============================================================================

SAMPLE_DOCUMENT = {
    "id": 1,
    "names": ["a", "b"],
    "externalIds": [{"providerId": "p1"}],
    "level1": [{"level1param": "L", "level2": [{"level2param": "M"}]}],
    "languageproficiencies": [],
}

PERSON_DOCUMENT = {
    "id": "person-42",
    "names": ["Ada", "Augusta", "Ada"],
    "externalIds": [
        {"providerId": "orcid", "value": "0000-0001"},
        {"providerId": "github", "value": "ada"},
        {"providerId": "orcid", "value": "0000-0002"},
    ],
    "level1": [
        {
            "level1param": "eng",
            "level2": [{"level2param": "compilers"}, {"level2param": "analysis"}],
        },
        {"level1param": "math", "level2": []},
        {"level1param": "music", "level2": [{"level2param": "harmony", "weight": 3}]},
    ],
    "languageproficiencies": [
        {"pos": 0, "language": "en"},
        {"pos": 1, "language": "fr"},
    ],
}


@pytest.fixture
def sample_document() -> dict:
    """Smallest document touching every branch once."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def person_document() -> dict:
    """Document with repeated discriminators and an empty nested collection."""
    return copy.deepcopy(PERSON_DOCUMENT)


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def error_policy(monkeypatch):
    """Run every test under the default ``error`` policy, whatever the env says."""
    monkeypatch.setattr(settings, "missing_field_policy", "error")


# =============================================================================
# Registry Fixtures
# =============================================================================


@pytest.fixture
def registered_views():
    """Registry holding only the built-in document views."""
    ViewRegistry._clear_for_testing()
    register_document_views()
    yield ViewRegistry.all_views()
    ViewRegistry._clear_for_testing()


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def client(registered_views):
    """Async test client for the FastAPI app.

    ASGITransport does not run lifespan events, so views are registered by
    the ``registered_views`` fixture instead.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
