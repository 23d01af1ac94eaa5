"""Pydantic base schema utilities for component core models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


def _to_camel(s: str) -> str:
    """Convert snake_case to camelCase for JSON aliasing."""
    parts = s.split("_")
    return parts[0] + "".join(p.capitalize() or "_" for p in parts[1:])


class BaseSchema(BaseModel):
    """
    Base Pydantic model for all domain schemas.

    Configures common Pydantic behaviors:
    - ``populate_by_name=True``: Allow initialization by alias or field name.
    - ``extra="forbid"``: Prevent unknown fields from slipping into the model, ensuring strict validation.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
    )


class WireSchema(BaseSchema):
    """Base for models whose wire form uses camelCase keys.

    - Uses a snake->camel alias generator for JSON interop
    - Still accepts snake_case names on construction
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        alias_generator=_to_camel,
    )
