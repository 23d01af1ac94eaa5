"""Uniform invocation of registered capabilities.

The dispatcher is the fault boundary of the component core: whatever a
capability raises, or returns in the wrong shape, is logged here and turned into
a failed result. Nothing above it sees an exception from capability code.

Result data leaves the dispatcher in JSON-compatible form. Data that cannot be
converted is dropped and the message says so; the success flag is kept.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Type, Union

from pydantic_core import PydanticSerializationError, to_jsonable_python

from mcp_server_factory.core.logging_config import get_logger

from .capabilities.registry import ComponentRegistry
from .schemas.domain import (
    ComponentKind,
    InvocationRequest,
    ReadResult,
    ResourceContent,
    ResultEnvelope,
    TemplateResponse,
)

logger = get_logger(__name__)

SERIALIZATION_FAILURE_SUFFIX = "\n\nError: Failed to convert data to JSON"


def not_found_message(kind: ComponentKind, target: str) -> str:
    return f"{kind.label} not found: {target}"


def _expect(value: Any, expected: Type[Any]) -> None:
    if not isinstance(value, expected):
        raise TypeError(f"expected {expected.__name__}, got {type(value).__name__}")


class Dispatcher:
    """Resolve a request through the registry, run it and normalize the outcome."""

    def __init__(self, registry: ComponentRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ComponentRegistry:
        return self._registry

    def invoke(self, request: InvocationRequest) -> Union[ResultEnvelope, ReadResult]:
        if request.kind is ComponentKind.action:
            return self.call_action(request.target_name or "", request.parameters)
        if request.kind is ComponentKind.template:
            return self.render_template(request.target_name or "", request.parameters)
        return self.read(request.target_uri or "")

    def call_action(self, name: str, parameters: Optional[Mapping[str, Any]] = None) -> ResultEnvelope:
        params: Dict[str, Any] = dict(parameters or {})
        action = self._registry.lookup_action(name)
        if action is None:
            logger.warning(f"Action not found: {name}")
            return ResultEnvelope.fail(not_found_message(ComponentKind.action, name))

        logger.info(f"Calling action '{name}'")
        try:
            envelope = action.execute(params)
            _expect(envelope, ResultEnvelope)
            return self._jsonable(envelope)
        except Exception as e:
            logger.exception(f"Action '{name}' raised: {e}")
            return ResultEnvelope.fail(f"Error executing action '{name}': {e}")

    def render_template(self, name: str, parameters: Optional[Mapping[str, Any]] = None) -> ResultEnvelope:
        params: Dict[str, Any] = dict(parameters or {})
        template = self._registry.lookup_template(name)
        if template is None:
            logger.warning(f"Template not found: {name}")
            return ResultEnvelope.fail(not_found_message(ComponentKind.template, name))

        logger.info(f"Rendering template '{name}'")
        try:
            response = template.render(params)
            _expect(response, TemplateResponse)
            return self._jsonable(ResultEnvelope.ok(response.content, response.metadata))
        except Exception as e:
            logger.exception(f"Template '{name}' raised: {e}")
            return ResultEnvelope.fail(f"Error rendering template '{name}': {e}")

    def read(self, uri: str) -> ReadResult:
        provider = self._registry.match_provider(uri)
        if provider is None:
            logger.warning(f"No resource provider matches URI: {uri}")
            return ReadResult(success=False, message=not_found_message(ComponentKind.data_provider, uri))

        logger.info(f"Reading '{uri}' from provider '{provider.name}'")
        try:
            content = provider.read(uri)
            if content is None:
                return ReadResult(success=False, message=not_found_message(ComponentKind.data_provider, uri))
            _expect(content, ResourceContent)
            return ReadResult(success=True, message=f"Resource read: {uri}", contents=[content])
        except Exception as e:
            logger.exception(f"Provider '{provider.name}' raised for {uri}: {e}")
            return ReadResult(success=False, message=f"Error reading resource '{uri}': {e}")

    @staticmethod
    def _jsonable(envelope: ResultEnvelope) -> ResultEnvelope:
        if envelope.data is None:
            return envelope
        try:
            data = to_jsonable_python(envelope.data)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            logger.warning(f"Result data could not be converted to JSON: {e}")
            return envelope.model_copy(update={"data": None, "message": envelope.message + SERIALIZATION_FAILURE_SUFFIX})
        return envelope.model_copy(update={"data": data})
