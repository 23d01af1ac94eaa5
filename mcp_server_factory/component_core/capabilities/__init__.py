"""Capability kinds, the component registry and the built-in capabilities.

A *capability* is the unit of registration. There are three kinds:

- ``Action``: invoked with parameters, answers with a ``ResultEnvelope``.
- ``DataProvider``: serves content for URIs matching its pattern.
- ``Template``: renders text from parameters.

Capabilities are registered once at startup into a ``ComponentRegistry``, which
is then frozen. The dispatcher resolves every invocation through it.

This package exports:

- ``Action``/``DataProvider``/``Template`` and the ``Capability`` union.
- ``ComponentRegistry``: name (or URI pattern) to implementation mapping.
- ``derive_schema``/``describe``: discovery helpers.
"""

from .base import (
    Action,
    Capability,
    DataProvider,
    ParametersModel,
    Template,
    derive_schema,
    describe,
    parse_parameters,
)
from .registry import ComponentRegistry

__all__ = [
    "Action",
    "Capability",
    "ComponentRegistry",
    "DataProvider",
    "ParametersModel",
    "Template",
    "derive_schema",
    "describe",
    "parse_parameters",
]
