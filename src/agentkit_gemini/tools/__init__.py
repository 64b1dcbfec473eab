"""Schema conversion and execution layer for Gemini function calling.

This package converts action catalogs into Gemini function declarations and
executes the function calls Gemini issues against those catalogs.
"""

from agentkit_gemini.tools.catalog import get_actions, load_catalog
from agentkit_gemini.tools.errors import (
    FunctionNotFoundError,
    InvalidArgumentsError,
    ToolError,
)
from agentkit_gemini.tools.execution import execute_gemini_function
from agentkit_gemini.tools.listing import get_gemini_tool, get_gemini_tools
from agentkit_gemini.tools.schema import to_gemini_schema
from agentkit_gemini.tools.types import (
    Action,
    ActionCatalog,
    FunctionCall,
    FunctionDeclaration,
    GeminiTool,
)

__all__ = [
    # Operations
    "get_gemini_tools",
    "get_gemini_tool",
    "execute_gemini_function",
    "to_gemini_schema",
    "get_actions",
    "load_catalog",
    # Types
    "Action",
    "ActionCatalog",
    "FunctionCall",
    "FunctionDeclaration",
    "GeminiTool",
    # Errors
    "ToolError",
    "FunctionNotFoundError",
    "InvalidArgumentsError",
]
