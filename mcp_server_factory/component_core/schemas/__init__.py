"""Schemas and DTOs for the component core."""

from .domain import (
    CapabilityDescriptor,
    ComponentKind,
    InvocationRequest,
    ProviderDescriptor,
    ReadResult,
    ResourceContent,
    ResultEnvelope,
    TemplateResponse,
)
from .parameter import ParameterSchema, SchemaType, derive_parameter_schema

__all__ = [
    "CapabilityDescriptor",
    "ComponentKind",
    "InvocationRequest",
    "ParameterSchema",
    "ProviderDescriptor",
    "ReadResult",
    "ResourceContent",
    "ResultEnvelope",
    "SchemaType",
    "TemplateResponse",
    "derive_parameter_schema",
]
