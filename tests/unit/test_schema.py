"""Unit tests for converting pydantic schemas into Gemini schemas."""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, RootModel, field_validator
from pydantic_core import core_schema
from typing_extensions import NotRequired, TypedDict

from agentkit_gemini.tools import to_gemini_schema

from tests.samples import ComplexArgs, Node, NumberArgs, StringArgs, UnionArgs


class TestPrimitives:
    """Tests for scalar shapes."""

    def test_none_defaults_to_string(self):
        """Test that an absent schema becomes a plain string."""
        assert to_gemini_schema(None) == {"type": "string"}

    def test_string(self):
        assert to_gemini_schema(str) == {"type": "string"}

    def test_string_length_constraints(self):
        """Test that length bounds map to minLength/maxLength."""
        schema = Annotated[str, Field(min_length=2, max_length=5)]
        assert to_gemini_schema(schema) == {
            "type": "string",
            "minLength": 2,
            "maxLength": 5,
        }

    def test_integer(self):
        assert to_gemini_schema(int) == {"type": "integer"}

    def test_integer_bounds(self):
        schema = Annotated[int, Field(ge=1, le=10)]
        assert to_gemini_schema(schema) == {
            "type": "integer",
            "minimum": 1,
            "maximum": 10,
        }

    def test_exclusive_bounds_map_to_minimum_and_maximum(self):
        """Test that gt/lt are emitted as plain minimum/maximum."""
        schema = Annotated[float, Field(gt=0, lt=1)]
        assert to_gemini_schema(schema) == {
            "type": "number",
            "minimum": 0,
            "maximum": 1,
        }

    def test_float(self):
        assert to_gemini_schema(float) == {"type": "number"}

    def test_boolean(self):
        assert to_gemini_schema(bool) == {"type": "boolean"}

    def test_core_schema_input(self):
        """Test that a raw pydantic-core schema is accepted as input."""
        assert to_gemini_schema(core_schema.str_schema(min_length=1)) == {
            "type": "string",
            "minLength": 1,
        }


class TestContainers:
    """Tests for arrays, maps and objects."""

    def test_list(self):
        assert to_gemini_schema(list[int]) == {
            "type": "array",
            "items": {"type": "integer"},
        }

    def test_set(self):
        assert to_gemini_schema(set[str]) == {
            "type": "array",
            "items": {"type": "string"},
        }

    def test_variadic_tuple(self):
        assert to_gemini_schema(tuple[float, ...]) == {
            "type": "array",
            "items": {"type": "number"},
        }

    def test_nested_list(self):
        assert to_gemini_schema(list[list[bool]]) == {
            "type": "array",
            "items": {"type": "array", "items": {"type": "boolean"}},
        }

    def test_record(self):
        """Test that a keyed map uses additionalProperties."""
        assert to_gemini_schema(dict[str, int]) == {
            "type": "object",
            "additionalProperties": {"type": "integer"},
        }

    def test_object_required_excludes_optional_fields(self):
        """Test that only fields without defaults are required."""

        class Args(BaseModel):
            a: str
            b: float = 1.0

        assert to_gemini_schema(Args) == {
            "type": "object",
            "properties": {
                "a": {"type": "string"},
                "b": {"type": "number"},
            },
            "required": ["a"],
        }

    def test_object_without_required_fields_omits_required(self):
        class Args(BaseModel):
            limit: int = 10

        result = to_gemini_schema(Args)

        assert result == {
            "type": "object",
            "properties": {"limit": {"type": "integer"}},
        }
        assert "required" not in result

    def test_empty_object(self):
        class NoArgs(BaseModel):
            pass

        assert to_gemini_schema(NoArgs) == {"type": "object", "properties": {}}

    def test_object_uses_field_alias(self):
        """Test that aliased fields are declared under their alias."""

        class Args(BaseModel):
            wallet_address: str = Field(alias="walletAddress")

        assert to_gemini_schema(Args) == {
            "type": "object",
            "properties": {"walletAddress": {"type": "string"}},
            "required": ["walletAddress"],
        }

    def test_typed_dict(self):
        class Args(TypedDict):
            a: str
            b: NotRequired[int]

        assert to_gemini_schema(Args) == {
            "type": "object",
            "properties": {
                "a": {"type": "string"},
                "b": {"type": "integer"},
            },
            "required": ["a"],
        }

    def test_dataclass(self):
        @dataclass
        class Args:
            x: int
            y: str = "default"

        assert to_gemini_schema(Args) == {
            "type": "object",
            "properties": {
                "x": {"type": "integer"},
                "y": {"type": "string"},
            },
            "required": ["x"],
        }

    def test_reused_nested_model(self):
        """Test that a model used twice is expanded at both sites."""

        class Point(BaseModel):
            x: int
            y: int

        class Line(BaseModel):
            start: Point
            end: Point

        point = {
            "type": "object",
            "properties": {"x": {"type": "integer"}, "y": {"type": "integer"}},
            "required": ["x", "y"],
        }
        assert to_gemini_schema(Line) == {
            "type": "object",
            "properties": {"start": point, "end": point},
            "required": ["start", "end"],
        }

    def test_recursive_model_is_cut_at_the_cycle(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = to_gemini_schema(Node)

        assert result == {
            "type": "object",
            "properties": {
                "value": {"type": "integer"},
                "children": {"type": "array", "items": {"type": "string"}},
            },
            "required": ["value"],
        }
        assert "Recursive schema reference" in caplog.text

    def test_root_model(self):
        class Tags(RootModel[list[str]]):
            pass

        assert to_gemini_schema(Tags) == {
            "type": "array",
            "items": {"type": "string"},
        }

    def test_field_validator_is_transparent(self):
        class Args(BaseModel):
            address: str

            @field_validator("address")
            @classmethod
            def lower(cls, value: str) -> str:
                return value.lower()

        assert to_gemini_schema(Args) == {
            "type": "object",
            "properties": {"address": {"type": "string"}},
            "required": ["address"],
        }


class TestEnumerations:
    """Tests for enums, literals and unions."""

    def test_enum(self):
        class Network(str, Enum):
            BASE = "base-mainnet"
            SEPOLIA = "base-sepolia"

        assert to_gemini_schema(Network) == {
            "type": "string",
            "enum": ["base-mainnet", "base-sepolia"],
        }

    def test_int_enum_values_are_stringified(self):
        class Priority(IntEnum):
            LOW = 1
            HIGH = 2

        assert to_gemini_schema(Priority) == {"type": "string", "enum": ["1", "2"]}

    def test_string_literal(self):
        assert to_gemini_schema(Literal["x"]) == {"type": "string", "enum": ["x"]}

    def test_literal_type_follows_value(self):
        assert to_gemini_schema(Literal[5]) == {"type": "integer", "enum": [5]}
        assert to_gemini_schema(Literal[True]) == {"type": "boolean", "enum": [True]}

    def test_multi_value_literal(self):
        assert to_gemini_schema(Literal["x", "y"]) == {
            "type": "string",
            "enum": ["x", "y"],
        }

    def test_union_of_literals_collapses_to_enum(self):
        schema = Literal["x"] | Literal["y"]
        assert to_gemini_schema(schema) == {"type": "string", "enum": ["x", "y"]}

    def test_mixed_union_keeps_first_branch(self):
        assert to_gemini_schema(int | str) == {"type": "integer"}
        assert to_gemini_schema(str | int) == {"type": "string"}

    def test_union_of_models_keeps_first_branch(self):
        class Transfer(BaseModel):
            to: str

        class Swap(BaseModel):
            pair: list[str]

        assert to_gemini_schema(Transfer | Swap) == {
            "type": "object",
            "properties": {"to": {"type": "string"}},
            "required": ["to"],
        }

    def test_nullable(self):
        assert to_gemini_schema(int | None) == {"type": "integer", "nullable": True}

    def test_nullable_keeps_constraints(self):
        schema = Annotated[str, Field(max_length=3)] | None
        assert to_gemini_schema(schema) == {
            "type": "string",
            "maxLength": 3,
            "nullable": True,
        }


class TestUnsupported:
    """Tests for shapes Gemini cannot express."""

    def test_any_falls_back_to_string(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = to_gemini_schema(Any)

        assert result == {"type": "string"}
        assert "Unsupported schema type: any, falling back to string" in caplog.text

    def test_datetime_falls_back_to_string(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = to_gemini_schema(datetime)

        assert result == {"type": "string"}
        assert "Unsupported schema type: datetime" in caplog.text

    def test_unknown_core_schema_kind(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = to_gemini_schema({"type": "something-new"})

        assert result == {"type": "string"}
        assert "something-new" in caplog.text

    def test_unsupported_field_does_not_affect_siblings(self):
        class Args(BaseModel):
            when: datetime
            note: str

        assert to_gemini_schema(Args) == {
            "type": "object",
            "properties": {
                "when": {"type": "string"},
                "note": {"type": "string"},
            },
            "required": ["when", "note"],
        }


class TestActionSchemas:
    """End-to-end conversions of the shared sample argument models."""

    def test_string_args(self):
        assert to_gemini_schema(StringArgs) == {
            "type": "object",
            "properties": {
                "message": {"type": "string", "minLength": 1, "maxLength": 100},
                "optional": {"type": "string", "nullable": True},
            },
            "required": ["message"],
        }

    def test_number_args(self):
        assert to_gemini_schema(NumberArgs) == {
            "type": "object",
            "properties": {
                "amount": {"type": "number", "minimum": 0, "maximum": 1000},
                "count": {"type": "integer"},
            },
            "required": ["amount", "count"],
        }

    def test_complex_args(self):
        assert to_gemini_schema(ComplexArgs) == {
            "type": "object",
            "properties": {
                "user": {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string"},
                        "age": {"type": "number"},
                    },
                    "required": ["name"],
                },
                "tags": {"type": "array", "items": {"type": "string"}},
                "status": {
                    "type": "string",
                    "enum": ["active", "inactive", "pending"],
                },
                "metadata": {
                    "type": "object",
                    "additionalProperties": {"type": "string"},
                },
                "is_enabled": {"type": "boolean"},
            },
            "required": ["user", "tags", "status", "metadata", "is_enabled"],
        }

    def test_union_args(self):
        result = to_gemini_schema(UnionArgs)

        assert result["properties"]["value"] == {
            "type": "string",
            "enum": ["option1", "option2", "option3"],
        }
        assert result["properties"]["nullable_field"] == {
            "type": "string",
            "nullable": True,
        }
        assert result["required"] == ["value", "nullable_field"]
