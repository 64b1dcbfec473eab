"""Type definitions for the Gemini tool adapter.

This module defines the structures exchanged between an action catalog and
the Gemini function-calling API: actions, function declarations and
function-call requests.
"""

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol, TypedDict, runtime_checkable


class FunctionDeclaration(TypedDict):
    """A Gemini function declaration derived from a catalog action."""

    name: str
    description: str
    parameters: dict[str, Any]


class GeminiTool(TypedDict):
    """The Gemini ``Tool`` envelope around a list of declarations."""

    function_declarations: list[FunctionDeclaration]


@dataclass
class Action:
    """An invocable, schema-validated capability exposed by a catalog.

    Mirrors the attributes of ``coinbase_agentkit.Action`` so hand-built
    catalogs and AgentKit catalogs can be mixed freely.

    Attributes:
        name: Unique identifier the model uses to call the action
        description: Human-readable description shown to the model
        args_schema: Pydantic model (or any type annotation) describing the
            accepted arguments, or None when the action takes free-form args
        invoke: Callable receiving the validated arguments as a dict and
            returning a result string, or an awaitable of one
    """

    name: str
    description: str
    invoke: Callable[[dict[str, Any]], str | Awaitable[str]]
    args_schema: Any = None


@dataclass
class FunctionCall:
    """A function call issued by the model."""

    name: str
    args: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class ActionProvider(Protocol):
    """Anything that can list its actions (e.g. an ``AgentKit`` instance)."""

    def get_actions(self) -> list[Any]: ...


ActionCatalog = ActionProvider | Iterable[Any]
