"""Access to action catalogs.

A catalog is either an object exposing ``get_actions()`` (such as an
``AgentKit`` instance) or a plain iterable of actions. This module
normalises both into a list snapshot and loads catalogs from import strings.
"""

import importlib
import logging
from typing import Any

from agentkit_gemini.tools.types import ActionCatalog, ActionProvider

logger = logging.getLogger(__name__)


def get_actions(catalog: ActionCatalog) -> list[Any]:
    """Take a snapshot of the actions in a catalog, preserving order."""
    if isinstance(catalog, ActionProvider):
        return list(catalog.get_actions())
    return list(catalog)


def get_action_schema(action: Any) -> Any:
    """Return the argument schema of an action, or None if it has none.

    AgentKit actions carry the schema as ``args_schema``; ``schema`` is
    accepted as well.
    """
    schema = getattr(action, "args_schema", None)
    if schema is None:
        schema = getattr(action, "schema", None)
    return schema


def find_action(catalog: ActionCatalog, name: str) -> Any | None:
    """Return the first action whose name matches exactly, or None."""
    for action in get_actions(catalog):
        if action.name == name:
            return action
    return None


def load_catalog(import_string: str) -> ActionCatalog:
    """Load a catalog from a ``module:attribute`` import string.

    If the attribute is callable and does not already behave like a catalog,
    it is treated as a factory and called without arguments.

    Args:
        import_string: Import path such as ``"myapp.wallet:agent_kit"``

    Returns:
        The loaded catalog

    Raises:
        ValueError: If the import string is malformed
        ImportError: If the module cannot be imported
        AttributeError: If the attribute does not exist in the module
    """
    module_name, _, attribute = import_string.partition(":")
    if not module_name or not attribute:
        raise ValueError(
            f"Invalid catalog import string '{import_string}', expected 'module:attribute'"
        )

    module = importlib.import_module(module_name)

    target: Any = module
    for part in attribute.split("."):
        target = getattr(target, part)

    if callable(target) and not isinstance(target, ActionProvider):
        logger.debug(f"Calling catalog factory {import_string}")
        target = target()

    logger.info(f"Loaded action catalog from {import_string}")
    return target
