"""Pytest configuration and shared fixtures for agentkit-gemini tests.

This module provides common fixtures used across all test modules,
including sample actions, test app creation and async client setup.
"""

from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from agentkit_gemini import create_app
from agentkit_gemini.config import AgentKitGeminiSettings
from agentkit_gemini.tools import Action

from tests.samples import ComplexArgs, NumberArgs, StringArgs, UnionArgs


@pytest.fixture
def string_action():
    """An action with constrained and optional string arguments."""
    return Action(
        name="testStringAction",
        description="A test action with string parameter",
        args_schema=StringArgs,
        invoke=MagicMock(
            side_effect=lambda args: f"String action invoked with {args['message']}"
        ),
    )


@pytest.fixture
def number_action():
    """An action with numeric arguments."""
    return Action(
        name="testNumberAction",
        description="A test action with number parameter",
        args_schema=NumberArgs,
        invoke=MagicMock(
            side_effect=lambda args: (
                f"Number action invoked with amount {args['amount']} and count {args['count']}"
            )
        ),
    )


@pytest.fixture
def complex_action():
    """An action with nested objects, arrays, enums and maps."""
    return Action(
        name="testComplexAction",
        description="A test action with complex parameters",
        args_schema=ComplexArgs,
        invoke=MagicMock(return_value="Complex action invoked"),
    )


@pytest.fixture
def union_action():
    """An action with literal unions and nullable fields."""
    return Action(
        name="testUnionAction",
        description="A test action with union types",
        args_schema=UnionArgs,
        invoke=MagicMock(return_value="Union action invoked"),
    )


@pytest.fixture
def catalog(string_action, number_action, complex_action, union_action):
    """A catalog holding all sample actions, in a fixed order."""
    return [string_action, number_action, complex_action, union_action]


@pytest.fixture
def test_settings():
    """Create test settings.

    Returns:
        AgentKitGeminiSettings: Settings instance configured for testing.
    """
    return AgentKitGeminiSettings(
        host="127.0.0.1",
        port=8000,
        catalog=None,
        run_sync_actions_in_thread=True,
        log_level="DEBUG",
        cors_origins=["*"],
    )


@pytest.fixture
def test_app(test_settings, catalog):
    """Create a FastAPI test application serving the sample catalog.

    Args:
        test_settings: Test settings fixture.
        catalog: Sample catalog fixture.

    Returns:
        FastAPI: Configured test application.
    """
    return create_app(settings=test_settings, catalog=catalog)


@pytest_asyncio.fixture
async def async_client(test_app):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    # Trigger the lifespan startup manually for tests
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
