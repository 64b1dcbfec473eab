"""Execution of Gemini function calls against an action catalog.

A call is resolved by exact name, its arguments are validated with the
action's pydantic schema, and only then is the action invoked. Lookup and
validation failures raise before any side effect; whatever the action itself
raises is passed through untouched.
"""

import asyncio
import inspect
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from agentkit_gemini.tools.catalog import find_action, get_action_schema
from agentkit_gemini.tools.errors import FunctionNotFoundError, InvalidArgumentsError
from agentkit_gemini.tools.schema import is_model_class
from agentkit_gemini.tools.types import ActionCatalog

logger = logging.getLogger(__name__)


def read_function_call(function_call: Any) -> tuple[str, dict[str, Any]]:
    """Extract the name and arguments of a function call.

    Accepts a ``FunctionCall``, a mapping with ``name``/``args`` keys, or any
    object with ``name``/``args`` attributes (such as the Gemini SDK's
    ``FunctionCall``). Missing arguments are read as an empty dict.
    """
    if isinstance(function_call, Mapping):
        name = function_call["name"]
        args = function_call.get("args")
    else:
        name = function_call.name
        args = getattr(function_call, "args", None)
    return name, dict(args or {})


def validate_arguments(action: Any, args: dict[str, Any]) -> Any:
    """Validate call arguments against an action's schema.

    Returns the validated data as plain Python objects, with defaults applied
    and values coerced. Aliased fields keep their alias, matching the keys
    declared to the model. Actions without a schema get their arguments back
    unchanged.

    Raises:
        InvalidArgumentsError: If the schema rejects the arguments
    """
    schema = get_action_schema(action)
    if schema is None:
        return args

    try:
        if is_model_class(schema):
            return schema.model_validate(args).model_dump(by_alias=True)
        adapter = TypeAdapter(schema)
        return adapter.dump_python(adapter.validate_python(args), by_alias=True)
    except ValidationError as e:
        raise InvalidArgumentsError(action.name, e) from e


async def invoke_action(action: Any, args: Any, run_sync_in_thread: bool = True) -> str:
    """Invoke an action and wait for its result.

    Coroutine functions are awaited directly. Plain callables run in a worker
    thread when ``run_sync_in_thread`` is set, so blocking I/O does not stall
    the event loop; an awaitable they return is awaited as well.
    """
    invoke = action.invoke
    if inspect.iscoroutinefunction(invoke):
        return await invoke(args)

    if run_sync_in_thread:
        result = await asyncio.to_thread(invoke, args)
    else:
        result = invoke(args)

    if inspect.isawaitable(result):
        result = await result
    return result


async def execute_gemini_function(
    catalog: ActionCatalog,
    function_call: Any,
    *,
    run_sync_in_thread: bool = True,
) -> str:
    """Execute a function call issued by Gemini.

    Args:
        catalog: An ``AgentKit``-like object or an iterable of actions
        function_call: The model's call, see ``read_function_call``
        run_sync_in_thread: Run synchronous actions in a worker thread

    Returns:
        The action's result, unchanged

    Raises:
        FunctionNotFoundError: If no action has the requested name
        InvalidArgumentsError: If the arguments fail schema validation
        Exception: Anything the action raises, propagated as-is
    """
    name, args = read_function_call(function_call)

    action = find_action(catalog, name)
    if action is None:
        logger.warning(f"Function call for unknown action '{name}'")
        raise FunctionNotFoundError(name)

    try:
        validated = validate_arguments(action, args)
    except InvalidArgumentsError as e:
        logger.warning(f"Rejected arguments for '{name}': {e.detail}")
        raise

    logger.info(f"Invoking action '{name}'")
    result = await invoke_action(action, validated, run_sync_in_thread=run_sync_in_thread)
    logger.debug(f"Action '{name}' returned {len(str(result))} characters")
    return result
