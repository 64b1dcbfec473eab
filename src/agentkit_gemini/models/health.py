"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    Attributes:
        status: Health status indicator ("ok" or "error").
        version: The version of agentkit-gemini.
        catalog_loaded: Whether an action catalog is available.
        action_count: Number of actions in the catalog, if loaded.
    """

    status: str = Field(..., description="Health status of the service")
    version: str = Field(..., description="Version of agentkit-gemini")
    catalog_loaded: bool = Field(
        default=False,
        description="Whether an action catalog is loaded",
    )
    action_count: int | None = Field(
        default=None,
        description="Number of actions in the loaded catalog",
    )
