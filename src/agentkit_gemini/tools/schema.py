"""Conversion of pydantic schemas into Gemini function-declaration schemas.

Gemini accepts a constrained subset of the OpenAPI 3.0 schema object. This
module walks the pydantic-core schema of an action's argument model and emits
that subset. Shapes Gemini cannot express degrade instead of failing:

- a union of literals collapses into a string enum
- any other union keeps its first branch only
- unknown schema kinds become ``{"type": "string"}`` and log a warning

Optionality is expressed only through the parent object's ``required`` list.
"""

import logging
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, TypeAdapter
from pydantic.errors import PydanticSchemaGenerationError

logger = logging.getLogger(__name__)

# Checked in order: bool is a subclass of int.
_LITERAL_TYPES: tuple[tuple[type, str], ...] = (
    (bool, "boolean"),
    (int, "integer"),
    (float, "number"),
    (str, "string"),
)

_ARRAY_KINDS = frozenset({"list", "set", "frozenset", "tuple"})
_VALIDATOR_KINDS = frozenset({"function-before", "function-after", "function-wrap"})


def to_gemini_schema(node: Any) -> dict[str, Any]:
    """Convert a pydantic schema into a Gemini-compatible schema.

    Args:
        node: A pydantic model class, any type annotation pydantic understands,
            a pydantic-core schema mapping, or None

    Returns:
        A JSON-compatible dict describing the schema. None yields
        ``{"type": "string"}``.
    """
    core_schema = _core_schema_of(node)
    if core_schema is None:
        return {"type": "string"}
    return _SchemaTranslator().translate(core_schema)


def is_model_class(node: Any) -> bool:
    """Return True if node is a pydantic model class."""
    try:
        return isinstance(node, type) and issubclass(node, BaseModel)
    except TypeError:
        # Parametrised generics such as list[int] are not classes.
        return False


def _core_schema_of(node: Any) -> Mapping[str, Any] | None:
    """Resolve the pydantic-core schema behind a translator input."""
    if node is None:
        return None
    if isinstance(node, Mapping) and "type" in node:
        return node
    if is_model_class(node):
        return node.__pydantic_core_schema__
    try:
        return TypeAdapter(node).core_schema
    except PydanticSchemaGenerationError as e:
        logger.warning(f"Cannot build a schema for {node!r}, falling back to string: {e}")
        return None


def _literal_type(value: Any) -> str:
    for python_type, schema_type in _LITERAL_TYPES:
        if isinstance(value, python_type):
            return schema_type
    return "string"


def _plain(value: Any) -> Any:
    """Reduce enum members and decimals to JSON-compatible values."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return float(value)
    return value


def _bound(schema: Mapping[str, Any], inclusive: str, exclusive: str) -> Any:
    value = schema.get(inclusive)
    if value is None:
        value = schema.get(exclusive)
    return value


class _SchemaTranslator:
    """Recursive walk over one pydantic-core schema tree.

    An instance keeps the definitions seen so far so that ``definition-ref``
    nodes can be resolved, and the refs currently being expanded so that
    self-referencing models stop instead of recursing forever.
    """

    def __init__(self) -> None:
        self._definitions: dict[str, Mapping[str, Any]] = {}
        self._expanding: list[str] = []

    def translate(self, schema: Mapping[str, Any] | None) -> dict[str, Any]:
        if schema is None:
            return {"type": "string"}

        kind = schema.get("type")
        handler = self._HANDLERS.get(kind)
        if handler is None:
            if kind in _ARRAY_KINDS:
                return self._array(schema)
            if kind in _VALIDATOR_KINDS and "schema" in schema:
                return self.translate(schema["schema"])
            return self._unsupported(kind)

        ref = schema.get("ref")
        if ref is None:
            return handler(self, schema)

        self._definitions.setdefault(ref, schema)
        self._expanding.append(ref)
        try:
            return handler(self, schema)
        finally:
            self._expanding.pop()

    def _unsupported(self, kind: Any) -> dict[str, Any]:
        logger.warning(f"Unsupported schema type: {kind}, falling back to string")
        return {"type": "string"}

    # --- primitives ---

    def _string(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {"type": "string"}
        if schema.get("min_length") is not None:
            result["minLength"] = schema["min_length"]
        if schema.get("max_length") is not None:
            result["maxLength"] = schema["max_length"]
        return result

    def _number(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {
            "type": "integer" if schema["type"] == "int" else "number"
        }
        minimum = _bound(schema, "ge", "gt")
        if minimum is not None:
            result["minimum"] = _plain(minimum)
        maximum = _bound(schema, "le", "lt")
        if maximum is not None:
            result["maximum"] = _plain(maximum)
        return result

    def _boolean(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        return {"type": "boolean"}

    # --- containers ---

    def _array(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        items = schema.get("items_schema")
        if isinstance(items, list):
            # Tuples list their positional item schemas.
            items = items[0] if items else None
        return {"type": "array", "items": self.translate(items)}

    def _dict(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "type": "object",
            "additionalProperties": self.translate(schema.get("values_schema")),
        }

    def _object(self, fields: list[tuple[str, Mapping[str, Any], bool]]) -> dict[str, Any]:
        properties: dict[str, Any] = {}
        required: list[str] = []
        for key, field_schema, is_required in fields:
            properties[key] = self.translate(field_schema)
            if is_required:
                required.append(key)

        result: dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            result["required"] = required
        return result

    def _model(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        # Root models and plain models both delegate to their inner schema.
        return self.translate(schema["schema"])

    def _model_fields(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        fields = []
        for name, field in schema["fields"].items():
            alias = field.get("validation_alias")
            key = alias if isinstance(alias, str) else name
            inner = field["schema"]
            fields.append((key, inner, inner.get("type") != "default"))
        return self._object(fields)

    def _typed_dict(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        fields = []
        for name, field in schema["fields"].items():
            inner = field["schema"]
            is_required = field.get("required", True) and inner.get("type") != "default"
            fields.append((name, inner, is_required))
        return self._object(fields)

    def _dataclass_args(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        fields = []
        for field in schema["fields"]:
            if field.get("init") is False or field.get("init_only"):
                continue
            inner = field["schema"]
            fields.append((field["name"], inner, inner.get("type") != "default"))
        return self._object(fields)

    # --- enumerations ---

    def _enum(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        # Gemini enums only hold strings.
        return {
            "type": "string",
            "enum": [str(_plain(member)) for member in schema["members"]],
        }

    def _literal(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        values = [_plain(value) for value in schema["expected"]]
        if len(values) == 1:
            return {"type": _literal_type(values[0]), "enum": values}
        return {"type": "string", "enum": values}

    def _union(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        choices = schema["choices"]
        if isinstance(choices, Mapping):
            branches = list(choices.values())
        else:
            branches = [c[0] if isinstance(c, tuple) else c for c in choices]

        if branches and all(b.get("type") == "literal" for b in branches):
            return {
                "type": "string",
                "enum": [_plain(v) for b in branches for v in b["expected"]],
            }

        # Gemini has no union support: keep the first branch.
        if branches:
            return self.translate(branches[0])
        return {"type": "string"}

    # --- wrappers ---

    def _default(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        return self.translate(schema["schema"])

    def _nullable(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        return {**self.translate(schema["schema"]), "nullable": True}

    def _chain(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        steps = schema.get("steps") or []
        return self.translate(steps[0] if steps else None)

    def _lax_or_strict(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        return self.translate(schema["lax_schema"])

    def _json_or_python(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        return self.translate(schema["python_schema"])

    def _definitions_node(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        for definition in schema.get("definitions", []):
            self._definitions[definition["ref"]] = definition
        return self.translate(schema["schema"])

    def _definition_ref(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        ref = schema["schema_ref"]
        if ref in self._expanding:
            logger.warning(f"Recursive schema reference {ref}, falling back to string")
            return {"type": "string"}
        target = self._definitions.get(ref)
        if target is None:
            return self._unsupported(f"definition-ref({ref})")
        return self.translate(target)

    _HANDLERS = {
        "str": _string,
        "int": _number,
        "float": _number,
        "decimal": _number,
        "bool": _boolean,
        "dict": _dict,
        "model": _model,
        "model-fields": _model_fields,
        "typed-dict": _typed_dict,
        "dataclass": _model,
        "dataclass-args": _dataclass_args,
        "enum": _enum,
        "literal": _literal,
        "union": _union,
        "tagged-union": _union,
        "default": _default,
        "nullable": _nullable,
        "chain": _chain,
        "lax-or-strict": _lax_or_strict,
        "json-or-python": _json_or_python,
        "definitions": _definitions_node,
        "definition-ref": _definition_ref,
    }
