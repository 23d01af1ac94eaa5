"""Protocol-neutral parameter schemas.

Capabilities declare their input as a Pydantic model class (the same way tool
definitions carry an ``input_schema`` model). ``derive_parameter_schema`` turns
that declaration into a ``ParameterSchema``: a small, JSON-Schema-like tree that
the protocol adapter can render for discovery.

Derivation is a pure function of the model class. Deriving twice yields
structurally equal schemas; ``required`` is kept sorted so that equality does
not depend on declaration order.
"""

from __future__ import annotations

import inspect
import types
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Type, Union, get_args, get_origin

from pydantic import BaseModel, Field, field_validator, model_validator

from .base import BaseSchema


class SchemaType(str, Enum):
    object = "object"
    string = "string"
    number = "number"
    boolean = "boolean"
    array = "array"


_LEAF_TYPES = {SchemaType.string, SchemaType.number, SchemaType.boolean}


class ParameterSchema(BaseSchema):
    type: SchemaType
    description: Optional[str] = None
    properties: Dict[str, ParameterSchema] = Field(default_factory=dict)
    required: List[str] = Field(default_factory=list)
    enum_values: Optional[List[Any]] = None
    items: Optional[ParameterSchema] = None

    @field_validator("required")
    @classmethod
    def _normalize_required(cls, v: List[str]) -> List[str]:
        return sorted(set(v))

    @model_validator(mode="after")
    def _check_invariants(self) -> "ParameterSchema":
        missing = [name for name in self.required if name not in self.properties]
        if missing:
            raise ValueError(f"required fields not declared in properties: {missing}")
        if self.enum_values is not None and self.type not in _LEAF_TYPES:
            raise ValueError(f"enum_values is only valid on leaf schemas, not '{self.type.value}'")
        if self.items is not None and self.type is not SchemaType.array:
            raise ValueError("items is only valid on array schemas")
        return self

    def to_json_schema(self) -> Dict[str, Any]:
        """Render as a JSON Schema dictionary."""
        out: Dict[str, Any] = {"type": self.type.value}
        if self.description:
            out["description"] = self.description
        if self.type is SchemaType.object:
            out["properties"] = {name: prop.to_json_schema() for name, prop in self.properties.items()}
            out["required"] = list(self.required)
        if self.items is not None:
            out["items"] = self.items.to_json_schema()
        if self.enum_values is not None:
            out["enum"] = list(self.enum_values)
        return out


ParameterSchema.model_rebuild()


def empty_object_schema() -> ParameterSchema:
    return ParameterSchema(type=SchemaType.object)


def _leaf_type_for_value(value: Any) -> SchemaType:
    if isinstance(value, bool):
        return SchemaType.boolean
    if isinstance(value, (int, float)):
        return SchemaType.number
    return SchemaType.string


def _schema_for(annotation: Any, description: Optional[str]) -> ParameterSchema:
    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Annotated:
        return _schema_for(args[0], description)

    if origin is Union or origin is types.UnionType:
        candidates = [a for a in args if a is not type(None)]
        if not candidates:
            return ParameterSchema(type=SchemaType.object, description=description)
        return _schema_for(candidates[0], description)

    if origin is Literal:
        values = list(args)
        return ParameterSchema(
            type=_leaf_type_for_value(values[0]),
            description=description,
            enum_values=values,
        )

    if inspect.isclass(annotation) and issubclass(annotation, Enum):
        values = [member.value for member in annotation]
        return ParameterSchema(
            type=_leaf_type_for_value(values[0]) if values else SchemaType.string,
            description=description,
            enum_values=values,
        )

    # bool before int: bool is an int subclass
    if annotation is bool:
        return ParameterSchema(type=SchemaType.boolean, description=description)
    if annotation in (int, float):
        return ParameterSchema(type=SchemaType.number, description=description)
    if annotation is str:
        return ParameterSchema(type=SchemaType.string, description=description)

    if origin in (list, tuple, set, frozenset) or annotation in (list, tuple, set, frozenset):
        items = _schema_for(args[0], None) if args else None
        return ParameterSchema(type=SchemaType.array, description=description, items=items)

    if inspect.isclass(annotation) and issubclass(annotation, BaseModel):
        nested = derive_parameter_schema(annotation)
        return nested.model_copy(update={"description": description})

    # dict, Mapping, Any and anything unrecognized
    return ParameterSchema(type=SchemaType.object, description=description)


def derive_parameter_schema(model: Optional[Type[BaseModel]]) -> ParameterSchema:
    """Derive the parameter schema for a capability's input model.

    Args:
        model: Pydantic model class describing the parameters, or ``None`` for a
            capability that takes no parameters.

    Returns:
        An object schema whose properties are keyed by the field's wire name
        (its alias when one is declared).
    """
    if model is None:
        return empty_object_schema()

    properties: Dict[str, ParameterSchema] = {}
    required: List[str] = []
    for name, field in model.model_fields.items():
        key = field.alias or name
        prop = _schema_for(field.annotation, field.description)
        # Advertised choices on a plain str field; parsing stays lenient.
        extra = field.json_schema_extra
        if isinstance(extra, dict) and "enum" in extra and prop.type in _LEAF_TYPES:
            prop = prop.model_copy(update={"enum_values": list(extra["enum"])})
        properties[key] = prop
        if field.is_required():
            required.append(key)
    return ParameterSchema(type=SchemaType.object, properties=properties, required=required)
