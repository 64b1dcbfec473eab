"""Gemini function declarations for an action catalog."""

import logging

from agentkit_gemini.tools.catalog import get_action_schema, get_actions
from agentkit_gemini.tools.schema import to_gemini_schema
from agentkit_gemini.tools.types import ActionCatalog, FunctionDeclaration, GeminiTool

logger = logging.getLogger(__name__)


def get_gemini_tools(catalog: ActionCatalog) -> list[FunctionDeclaration]:
    """Build one Gemini function declaration per catalog action.

    Declarations are recomputed on every call and follow catalog order.

    Args:
        catalog: An ``AgentKit``-like object or an iterable of actions

    Returns:
        List of declarations; empty for an empty catalog
    """
    declarations: list[FunctionDeclaration] = []
    seen: set[str] = set()

    for action in get_actions(catalog):
        if action.name in seen:
            logger.warning(
                f"Duplicate action name '{action.name}' in catalog, "
                "calls will resolve to the first one"
            )
        seen.add(action.name)

        declarations.append(
            FunctionDeclaration(
                name=action.name,
                description=action.description,
                parameters=to_gemini_schema(get_action_schema(action)),
            )
        )

    logger.debug(f"Built {len(declarations)} Gemini function declarations")
    return declarations


def get_gemini_tool(catalog: ActionCatalog) -> GeminiTool:
    """Wrap the catalog declarations in a Gemini ``Tool`` object."""
    return GeminiTool(function_declarations=get_gemini_tools(catalog))
