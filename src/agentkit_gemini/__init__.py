"""agentkit-gemini: Gemini function calling for agent action catalogs.

This package converts the actions of an agent toolkit into Gemini function
declarations and executes the function calls Gemini sends back. It can be
used as a library or served over HTTP.
"""

__version__ = "0.1.0"

from agentkit_gemini.app import create_app  # noqa: E402
from agentkit_gemini.tools import (  # noqa: E402
    Action,
    FunctionCall,
    FunctionNotFoundError,
    InvalidArgumentsError,
    execute_gemini_function,
    get_gemini_tool,
    get_gemini_tools,
    to_gemini_schema,
)

__all__ = [
    "create_app",
    "__version__",
    "get_gemini_tools",
    "get_gemini_tool",
    "execute_gemini_function",
    "to_gemini_schema",
    "Action",
    "FunctionCall",
    "FunctionNotFoundError",
    "InvalidArgumentsError",
]
