from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, model_validator

from .base import BaseSchema
from .parameter import ParameterSchema


class ComponentKind(str, Enum):
    action = "action"
    data_provider = "data_provider"
    template = "template"

    @property
    def label(self) -> str:
        """Human-readable kind name used in caller-facing messages."""
        return {
            ComponentKind.action: "Action",
            ComponentKind.data_provider: "Resource",
            ComponentKind.template: "Template",
        }[self]


class InvocationRequest(BaseSchema):
    """A single call into the dispatcher.

    Actions and Templates are addressed by ``target_name``; DataProviders are
    addressed by ``target_uri``.
    """

    kind: ComponentKind
    target_name: Optional[str] = None
    target_uri: Optional[str] = None
    parameters: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_target(self) -> "InvocationRequest":
        if self.kind is ComponentKind.data_provider:
            if not self.target_uri or self.target_name is not None:
                raise ValueError("data_provider requests must set target_uri only")
        elif not self.target_name or self.target_uri is not None:
            raise ValueError(f"{self.kind.value} requests must set target_name only")
        return self

    @property
    def target(self) -> str:
        return self.target_uri if self.kind is ComponentKind.data_provider else self.target_name  # type: ignore[return-value]


class ResultEnvelope(BaseSchema):
    """Uniform success/message/data wrapper returned by every invocation."""

    success: bool
    message: str
    data: Any = None

    @classmethod
    def ok(cls, message: str, data: Any = None) -> "ResultEnvelope":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, message: str, data: Any = None) -> "ResultEnvelope":
        return cls(success=False, message=message, data=data)


class ResourceContent(BaseSchema):
    uri: str
    mime_type: str = "text/plain"
    content: str


class ReadResult(BaseSchema):
    """Outcome of reading a URI-addressed data source.

    ``contents`` is empty when no provider matched or the provider had nothing
    to return; that is a soft failure, not an error.
    """

    success: bool
    message: str
    contents: List[ResourceContent] = Field(default_factory=list)


class TemplateResponse(BaseSchema):
    content: str
    metadata: Optional[Dict[str, Any]] = None


class CapabilityDescriptor(BaseSchema):
    """Discovery record for an Action or a Template."""

    name: str
    description: str
    kind: ComponentKind
    parameter_schema: ParameterSchema
    result_schema: Optional[ParameterSchema] = None


class ProviderDescriptor(BaseSchema):
    """Discovery record for a DataProvider."""

    name: str
    description: str
    uri_pattern: str
    uri_template: Optional[str] = None
    mime_type: str
    known_uris: List[str] = Field(default_factory=list)
