"""Exceptions raised while dispatching Gemini function calls.

Only lookup and validation failures are wrapped here. Exceptions raised by an
action while it runs reach the caller unchanged.
"""

from pydantic import ValidationError


class ToolError(Exception):
    """Base class for errors raised before an action is invoked."""


class FunctionNotFoundError(ToolError, LookupError):
    """The requested function name does not match any catalog action."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Function {name} not found in action catalog")


class InvalidArgumentsError(ToolError, ValueError):
    """The function-call arguments were rejected by the action's schema."""

    def __init__(self, name: str, validation_error: ValidationError):
        self.name = name
        self.validation_error = validation_error
        self.detail = str(validation_error)
        super().__init__(f"Invalid arguments for {name}: {self.detail}")
