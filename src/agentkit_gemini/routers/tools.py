"""Tools router exposing the action catalog to Gemini clients.

This module provides REST API endpoints for:
- Listing the catalog as Gemini function declarations
- Executing a function call issued by the model
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from agentkit_gemini.config import AgentKitGeminiSettings
from agentkit_gemini.dependencies import get_app_settings, get_catalog
from agentkit_gemini.models.tools import (
    FunctionCallRequest,
    FunctionCallResponse,
    FunctionDeclarationResponse,
    ToolListResponse,
)
from agentkit_gemini.tools import (
    ActionCatalog,
    FunctionCall,
    FunctionNotFoundError,
    InvalidArgumentsError,
    execute_gemini_function,
    get_gemini_tools,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/tools", tags=["tools"])


@router.get(
    "",
    response_model=ToolListResponse,
    summary="List Gemini function declarations",
)
async def list_tools(
    catalog: Annotated[ActionCatalog, Depends(get_catalog)],
) -> ToolListResponse:
    """List the catalog actions as Gemini function declarations.

    The response body can be passed directly as a Gemini ``Tool``.

    Args:
        catalog: Injected action catalog

    Returns:
        Declarations in catalog order
    """
    declarations = [
        FunctionDeclarationResponse(**declaration)
        for declaration in get_gemini_tools(catalog)
    ]
    return ToolListResponse(function_declarations=declarations)


@router.post(
    "/call",
    response_model=FunctionCallResponse,
    summary="Execute a function call",
)
async def call_tool(
    request: FunctionCallRequest,
    catalog: Annotated[ActionCatalog, Depends(get_catalog)],
    settings: Annotated[AgentKitGeminiSettings, Depends(get_app_settings)],
) -> FunctionCallResponse:
    """Validate and execute a function call issued by the model.

    Args:
        request: Function name and arguments
        catalog: Injected action catalog
        settings: Injected application settings

    Returns:
        The action result

    Raises:
        HTTPException: 404 if no action has the requested name
        HTTPException: 422 if the arguments fail validation
        HTTPException: 500 if the action raises
    """
    function_call = FunctionCall(name=request.name, args=request.args)
    try:
        result = await execute_gemini_function(
            catalog,
            function_call,
            run_sync_in_thread=settings.run_sync_actions_in_thread,
        )
    except FunctionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except InvalidArgumentsError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Action '{request.name}' failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )

    return FunctionCallResponse(name=request.name, result=str(result))
