"""Capability kinds and their shared declaration helpers.

A capability is the unit of registration. There are exactly three kinds:

- ``Action``: a named, invocable computation returning a ``ResultEnvelope``.
- ``Template``: a named generator of text from parameters, returning a
  ``TemplateResponse``.
- ``DataProvider``: a source of readable content addressed by a URI pattern.

``Capability`` is the closed union of the three. Code that needs to treat the
kinds differently branches on ``capability.kind`` rather than on further
subclassing.

Capabilities should:

- declare their parameters as a ``ParametersModel`` subclass so schemas can be
  derived for discovery,
- be deterministic with respect to their inputs as much as possible,
- never mutate the registry that owns them.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from mcp_server_factory.core.errors import ParameterValidationError

from ..schemas.domain import (
    CapabilityDescriptor,
    ComponentKind,
    ProviderDescriptor,
    ResourceContent,
    ResultEnvelope,
    TemplateResponse,
)
from ..schemas.parameter import ParameterSchema, derive_parameter_schema, empty_object_schema

ParamsT = TypeVar("ParamsT", bound="ParametersModel")


class ParametersModel(BaseModel):
    """Base for capability parameter declarations.

    Unknown keys are ignored: callers may send more than a capability reads.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def parse_parameters(model: Type[ParamsT], parameters: Optional[Mapping[str, Any]]) -> ParamsT:
    """Validate raw invocation parameters against a capability's model.

    Required fields that are absent or empty strings are reported by name before
    any type validation runs.

    Raises:
        ParameterValidationError: A required field is missing or a value has the
            wrong shape.
    """
    raw = dict(parameters or {})
    for name, field in model.model_fields.items():
        if not field.is_required():
            continue
        key = field.alias or name
        value = raw.get(key, raw.get(name))
        if value is None or value == "":
            raise ParameterValidationError(key)
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        field_name = ".".join(str(part) for part in first["loc"]) or model.__name__
        raise ParameterValidationError(field_name, first["msg"]) from exc


class Action(ABC):
    kind: ClassVar[ComponentKind] = ComponentKind.action
    name: ClassVar[str]
    description: ClassVar[str]
    parameters_model: ClassVar[Optional[Type[ParametersModel]]] = None
    result_model: ClassVar[Optional[Type[BaseModel]]] = None

    @abstractmethod
    def execute(self, parameters: Mapping[str, Any]) -> ResultEnvelope:
        """Run the action and report the outcome as an envelope."""


class Template(ABC):
    kind: ClassVar[ComponentKind] = ComponentKind.template
    name: ClassVar[str]
    description: ClassVar[str]
    parameters_model: ClassVar[Optional[Type[ParametersModel]]] = None

    @abstractmethod
    def render(self, parameters: Mapping[str, Any]) -> TemplateResponse:
        """Generate the templated text for the given parameters."""


class DataProvider(ABC):
    kind: ClassVar[ComponentKind] = ComponentKind.data_provider
    name: ClassVar[str]
    description: ClassVar[str]
    uri_pattern: ClassVar[str]
    uri_template: ClassVar[Optional[str]] = None
    mime_type: ClassVar[str] = "text/plain"

    def match(self, uri: str) -> Optional[re.Match[str]]:
        """Match ``uri`` against the whole pattern."""
        return re.fullmatch(self.uri_pattern, uri)

    def matches(self, uri: str) -> bool:
        return self.match(uri) is not None

    @abstractmethod
    def read(self, uri: str) -> Optional[ResourceContent]:
        """Return the content served at ``uri``, or ``None`` when there is none."""

    def known_uris(self) -> List[str]:
        """Concrete URIs this provider can serve, for listing. Empty by default."""
        return []


Capability = Union[Action, DataProvider, Template]


def derive_schema(capability: Capability) -> ParameterSchema:
    """Derive the parameter schema of any capability kind."""
    if capability.kind is ComponentKind.data_provider:
        return empty_object_schema()
    return derive_parameter_schema(capability.parameters_model)


def describe(capability: Capability) -> Union[CapabilityDescriptor, ProviderDescriptor]:
    """Build the discovery record for a capability."""
    if capability.kind is ComponentKind.data_provider:
        return ProviderDescriptor(
            name=capability.name,
            description=capability.description,
            uri_pattern=capability.uri_pattern,
            uri_template=capability.uri_template,
            mime_type=capability.mime_type,
            known_uris=capability.known_uris(),
        )
    result_model = getattr(capability, "result_model", None)
    return CapabilityDescriptor(
        name=capability.name,
        description=capability.description,
        kind=capability.kind,
        parameter_schema=derive_schema(capability),
        result_schema=derive_parameter_schema(result_model) if result_model is not None else None,
    )
