"""FastAPI application factory and lifespan management.

This module contains the create_app() factory function that creates and configures
the FastAPI application instance, including lifespan management for loading the
action catalog and router registration.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agentkit_gemini import __version__
from agentkit_gemini.config import AgentKitGeminiSettings
from agentkit_gemini.routers import health, tools
from agentkit_gemini.tools import ActionCatalog, get_actions, load_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI application.

    Loads the action catalog once at startup, unless one was passed to
    create_app(), and stores it in app.state for reuse across all requests.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control is yielded while the app is running.
    """
    settings: AgentKitGeminiSettings = app.state.settings

    if app.state.catalog is None and settings.catalog:
        try:
            app.state.catalog = load_catalog(settings.catalog)
        except Exception as e:
            logger.error(f"Failed to load action catalog '{settings.catalog}': {e}")
            raise

    if app.state.catalog is None:
        logger.warning("No action catalog configured - tool endpoints will be unavailable")
    else:
        action_count = len(get_actions(app.state.catalog))
        logger.info(f"Serving {action_count} actions")

    yield

    logger.info("Shutting down")


def create_app(
    settings: AgentKitGeminiSettings | None = None,
    catalog: ActionCatalog | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional AgentKitGeminiSettings instance. If not provided,
                  settings will be loaded from environment variables.
        catalog: Optional action catalog. Takes precedence over the
                 catalog import string in settings.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        from agentkit_gemini.dependencies import get_settings

        settings = get_settings()

    app = FastAPI(
        title="agentkit-gemini",
        description="Gemini function calling over an agent action catalog",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.catalog = catalog

    # Note: FastAPI's type hints for add_middleware are overly strict
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(tools.router)

    return app
