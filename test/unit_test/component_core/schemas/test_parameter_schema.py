from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal, Optional

import pytest
from pydantic import BaseModel, Field, ValidationError

from mcp_server_factory.component_core.schemas.parameter import (
    ParameterSchema,
    SchemaType,
    derive_parameter_schema,
    empty_object_schema,
)


class Color(str, Enum):
    red = "red"
    blue = "blue"


class Inner(BaseModel):
    path: str


class Everything(BaseModel):
    name: str = Field(description="A name")
    count: int = 0
    ratio: float = 1.0
    enabled: bool = False
    tags: List[str] = Field(default_factory=list)
    options: Dict[str, Any] = Field(default_factory=dict)
    mode: Literal["fast", "slow"] = "fast"
    color: Color = Color.red
    nickname: Optional[str] = None
    inner: Inner
    camel: str = Field(default="x", alias="camelCase")
    hinted: str = Field(default="a", json_schema_extra={"enum": ["a", "b"]})


class TestDerivation:
    def test_none_yields_empty_object(self):
        schema = derive_parameter_schema(None)

        assert schema == empty_object_schema()
        assert schema.to_json_schema() == {"type": "object", "properties": {}, "required": []}

    def test_model_without_fields_yields_empty_object(self):
        class NoFields(BaseModel):
            pass

        assert derive_parameter_schema(NoFields) == empty_object_schema()

    def test_type_mapping(self):
        props = derive_parameter_schema(Everything).properties

        assert props["name"].type is SchemaType.string
        assert props["name"].description == "A name"
        assert props["count"].type is SchemaType.number
        assert props["ratio"].type is SchemaType.number
        assert props["enabled"].type is SchemaType.boolean
        assert props["tags"].type is SchemaType.array
        assert props["tags"].items == ParameterSchema(type=SchemaType.string)
        assert props["options"].type is SchemaType.object
        assert props["nickname"].type is SchemaType.string

    def test_enums(self):
        props = derive_parameter_schema(Everything).properties

        assert props["mode"].enum_values == ["fast", "slow"]
        assert props["color"].enum_values == ["red", "blue"]
        assert props["hinted"].type is SchemaType.string
        assert props["hinted"].enum_values == ["a", "b"]

    def test_nested_model_recurses(self):
        inner = derive_parameter_schema(Everything).properties["inner"]

        assert inner.type is SchemaType.object
        assert inner.required == ["path"]
        assert inner.properties["path"].type is SchemaType.string

    def test_alias_is_the_property_key(self):
        props = derive_parameter_schema(Everything).properties

        assert "camelCase" in props
        assert "camel" not in props

    def test_required_are_fields_without_defaults(self):
        assert derive_parameter_schema(Everything).required == ["inner", "name"]

    def test_derivation_is_idempotent(self):
        assert derive_parameter_schema(Everything) == derive_parameter_schema(Everything)

    def test_default_outside_enum_is_not_rejected(self):
        class Loose(BaseModel):
            choice: str = Field(default="other", json_schema_extra={"enum": ["a", "b"]})

        assert derive_parameter_schema(Loose).properties["choice"].enum_values == ["a", "b"]


class TestParameterSchemaInvariants:
    def test_required_must_be_declared(self):
        with pytest.raises(ValidationError):
            ParameterSchema(type=SchemaType.object, required=["missing"])

    def test_enum_only_on_leaves(self):
        with pytest.raises(ValidationError):
            ParameterSchema(type=SchemaType.object, enum_values=["a"])

    def test_items_only_on_arrays(self):
        with pytest.raises(ValidationError):
            ParameterSchema(type=SchemaType.string, items=ParameterSchema(type=SchemaType.string))

    def test_required_order_does_not_affect_equality(self):
        props = {"a": ParameterSchema(type=SchemaType.string), "b": ParameterSchema(type=SchemaType.number)}

        first = ParameterSchema(type=SchemaType.object, properties=props, required=["b", "a"])
        second = ParameterSchema(type=SchemaType.object, properties=props, required=["a", "b", "a"])

        assert first == second


class TestJsonSchemaRendering:
    def test_renders_enum_and_required(self):
        rendered = derive_parameter_schema(Everything).to_json_schema()

        assert rendered["type"] == "object"
        assert rendered["required"] == ["inner", "name"]
        assert rendered["properties"]["mode"] == {"type": "string", "enum": ["fast", "slow"]}
        assert rendered["properties"]["tags"] == {"type": "array", "items": {"type": "string"}}
        assert rendered["properties"]["name"]["description"] == "A name"
