"""
Pytest configuration and shared fixtures.

All fixtures use mocks to avoid real calls to the LLM or to a scoring
endpoint: the LLM is an AsyncMock, the endpoint an ``httpx.MockTransport``.

Usage:
    def test_example(make_scenario, endpoint_client):
        scenario = make_scenario(S=[("c1", "Strong brand", None)])
        client = endpoint_client(lambda request: httpx.Response(200, json={}))
"""

import os

# Settings validation needs a key before swot_scorer is imported
os.environ.setdefault("GROQ_API_KEY", "dummy_groq_key")

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock

from swot_scorer.schemas import AppState, Area, Criterion, Scenario, Weights
from swot_scorer.services.store import ScenarioStore


# =============================================================================
# LLM MOCK FIXTURES
# =============================================================================


@pytest.fixture
def mock_llm_response():
    """
    Factory fixture for creating mock LLM responses.

    Usage:
        response = mock_llm_response('{"score": 8}')
        assert response.content == '{"score": 8}'
    """
    def _create_response(content: str = '{"score": 5, "rationale": "ok"}'):
        response = MagicMock()
        response.content = content
        return response
    return _create_response


@pytest.fixture
def mock_llm(mock_llm_response):
    """AsyncMock that simulates the judge LLM; answers score 5 by default."""
    llm = AsyncMock()
    llm.ainvoke.return_value = mock_llm_response()
    return llm


# =============================================================================
# DOMAIN FIXTURES
# =============================================================================


@pytest.fixture
def make_scenario():
    """
    Factory fixture for scenarios.

    Each area keyword takes a list of ``(id, text, score)`` tuples.

    Usage:
        scenario = make_scenario(S=[("c1", "Cheap", 3)], name="Move")
    """
    def _create(scenario_id: str = "sc1", name: str = "Scenario A", description: str = "", **areas):
        criteria = {
            Area(key): tuple(Criterion(id=cid, text=text, score=score) for cid, text, score in items)
            for key, items in areas.items()
        }
        return Scenario(id=scenario_id, name=name, description=description, criteria=criteria)
    return _create


@pytest.fixture
def store(make_scenario):
    """Store seeded with one scenario holding a scored and an unscored criterion."""
    scenario = make_scenario(
        S=[("s1", "Strong brand", 8), ("s2", "Loyal customers", None)],
        T=[("t1", "New competitor", 13)],
    )
    return ScenarioStore(AppState(scenarios=(scenario,), weights=Weights.swot()))


# =============================================================================
# SCORING ENDPOINT FIXTURES
# =============================================================================


@pytest.fixture
def endpoint_client():
    """
    Factory for AsyncClients backed by ``httpx.MockTransport``.

    The handler receives the ``httpx.Request``; every request is recorded in
    ``client.requests_seen``.
    """
    def _create(handler):
        seen = []

        def _recording_handler(request: httpx.Request):
            seen.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(_recording_handler))
        client.requests_seen = seen
        return client
    return _create


# =============================================================================
# CONTAINER FIXTURES
# =============================================================================


@pytest.fixture
def test_container(mock_llm, store):
    """
    Fresh global container with the mocked LLM and seeded store.

    The process-wide singleton is reset before and after, so API tests see
    these overrides through ``get_container()``.
    """
    from swot_scorer.services.container import get_container, reset_container

    reset_container()
    container = get_container()
    container.override_llm(mock_llm)
    container.override_store(store)
    yield container
    reset_container()


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
