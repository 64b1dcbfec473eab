"""Request and response models for the tools API."""

from typing import Any

from pydantic import BaseModel, Field


class FunctionDeclarationResponse(BaseModel):
    """A single Gemini function declaration."""

    name: str = Field(..., description="Action name the model calls")
    description: str = Field(..., description="Action description shown to the model")
    parameters: dict[str, Any] = Field(
        ..., description="Gemini (OpenAPI 3.0 subset) schema of the arguments"
    )


class ToolListResponse(BaseModel):
    """Response model for listing the catalog as a Gemini tool."""

    function_declarations: list[FunctionDeclarationResponse] = Field(
        default_factory=list,
        description="Declarations in catalog order",
    )


class FunctionCallRequest(BaseModel):
    """Request model for executing a model-issued function call."""

    name: str = Field(..., min_length=1, description="Name of the action to call")
    args: dict[str, Any] = Field(
        default_factory=dict,
        description="Arguments produced by the model",
    )


class FunctionCallResponse(BaseModel):
    """Response model for an executed function call."""

    name: str = Field(..., description="Name of the action that was called")
    result: str = Field(..., description="Result returned by the action")
