"""Pydantic models for API request and response schemas.

This package contains all Pydantic models used for validating and
serializing API requests and responses across all endpoints.
"""

from agentkit_gemini.models.health import HealthResponse
from agentkit_gemini.models.tools import (
    FunctionCallRequest,
    FunctionCallResponse,
    FunctionDeclarationResponse,
    ToolListResponse,
)

__all__ = [
    "FunctionCallRequest",
    "FunctionCallResponse",
    "FunctionDeclarationResponse",
    "HealthResponse",
    "ToolListResponse",
]
