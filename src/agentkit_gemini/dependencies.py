"""Dependency injection providers for FastAPI endpoints.

This module provides FastAPI dependency functions that are used across
routers to inject the settings and the action catalog.
"""

from functools import lru_cache

from fastapi import HTTPException, Request

from agentkit_gemini.config import AgentKitGeminiSettings
from agentkit_gemini.tools import ActionCatalog


@lru_cache
def get_settings() -> AgentKitGeminiSettings:
    """Get the application settings instance.

    This function is cached so that the same settings instance is reused
    across all requests. Settings are loaded from environment variables
    with the AGENTKIT_GEMINI_ prefix.

    Returns:
        AgentKitGeminiSettings: The application configuration settings.
    """
    return AgentKitGeminiSettings()


def get_app_settings(request: Request) -> AgentKitGeminiSettings:
    """Get the settings the running app was created with.

    Uses app.state rather than the cached get_settings() so that tests
    can use their own isolated settings.
    """
    return request.app.state.settings


def get_catalog(request: Request) -> ActionCatalog:
    """Get the action catalog from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        ActionCatalog: The catalog loaded at startup.

    Raises:
        HTTPException: If no catalog is configured (503 Service Unavailable).
    """
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(
            status_code=503,
            detail="Action catalog not configured",
        )
    return catalog
