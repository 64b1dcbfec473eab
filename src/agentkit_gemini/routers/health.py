"""Health check endpoint router."""

import logging

from fastapi import APIRouter, Request

from agentkit_gemini import __version__
from agentkit_gemini.models.health import HealthResponse
from agentkit_gemini.tools import get_actions

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint.

    Returns the current health status and version of agentkit-gemini,
    along with the size of the loaded action catalog.

    Args:
        request: The FastAPI request object.

    Returns:
        HealthResponse: Health status and catalog information.
    """
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        return HealthResponse(status="ok", version=__version__)

    try:
        action_count = len(get_actions(catalog))
    except Exception as e:
        logger.warning(f"Could not list catalog actions: {e}")
        return HealthResponse(status="error", version=__version__, catalog_loaded=True)

    return HealthResponse(
        status="ok",
        version=__version__,
        catalog_loaded=True,
        action_count=action_count,
    )
