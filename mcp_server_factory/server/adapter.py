"""
MCP Protocol Adapter.

Translates between the component core and the wire types of the ``mcp`` SDK:

- Actions are exposed as MCP *tools*.
- DataProviders are exposed as MCP *resource templates* (plus the concrete
  resources they know about).
- Templates are exposed as MCP *prompts*.

The adapter holds no state of its own beyond the registry and dispatcher it
was given. Every coroutine here is registered as a handler on the lowlevel
MCP server in ``mcp_server_factory.server.app``.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from mcp import types
from mcp.server.lowlevel.helper_types import ReadResourceContents

from mcp_server_factory.component_core.capabilities.base import derive_schema
from mcp_server_factory.component_core.capabilities.registry import ComponentRegistry
from mcp_server_factory.component_core.dispatch import SERIALIZATION_FAILURE_SUFFIX, Dispatcher
from mcp_server_factory.component_core.schemas.domain import ComponentKind, ResultEnvelope
from mcp_server_factory.core.logging_config import get_logger

logger = get_logger(__name__)


def envelope_text(envelope: ResultEnvelope) -> str:
    """Render an envelope as tool-call text: the message, then the data as JSON."""
    if envelope.data is None:
        return envelope.message
    try:
        return envelope.message + "\n\n" + json.dumps(envelope.data, indent=2)
    except (TypeError, ValueError):
        return envelope.message + SERIALIZATION_FAILURE_SUFFIX


class McpProtocolAdapter:
    def __init__(self, registry: ComponentRegistry, dispatcher: Optional[Dispatcher] = None) -> None:
        self._registry = registry
        self._dispatcher = dispatcher or Dispatcher(registry)

    @property
    def registry(self) -> ComponentRegistry:
        return self._registry

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    # =====================================================================
    # Tools
    # =====================================================================

    async def list_tools(self) -> List[types.Tool]:
        return [
            types.Tool(
                name=action.name,
                description=action.description,
                inputSchema=derive_schema(action).to_json_schema(),
            )
            for action in self._registry.list_all(ComponentKind.action)
        ]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        logger.debug(f"call_tool: {name} {arguments}")
        envelope = self._dispatcher.call_action(name, arguments or {})
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=envelope_text(envelope))],
            isError=not envelope.success,
        )

    # =====================================================================
    # Resources
    # =====================================================================

    async def list_resource_templates(self) -> List[types.ResourceTemplate]:
        return [
            types.ResourceTemplate(
                uriTemplate=provider.uri_template or provider.uri_pattern,
                name=provider.name,
                description=provider.description,
                mimeType=provider.mime_type,
            )
            for provider in self._registry.list_all(ComponentKind.data_provider)
        ]

    async def list_resources(self) -> List[types.Resource]:
        resources: List[types.Resource] = []
        for provider in self._registry.list_all(ComponentKind.data_provider):
            for uri in provider.known_uris():
                resources.append(
                    types.Resource(
                        uri=uri,
                        name=f"{provider.name.capitalize()}: {uri.rsplit('/', 1)[-1]}",
                        description=provider.description,
                        mimeType=provider.mime_type,
                    )
                )
        return resources

    async def read_resource(self, uri: Any) -> List[ReadResourceContents]:
        result = self._dispatcher.read(str(uri))
        if not result.success:
            logger.info(f"read_resource returned nothing for {uri}: {result.message}")
        return [ReadResourceContents(content=c.content, mime_type=c.mime_type) for c in result.contents]

    # =====================================================================
    # Prompts
    # =====================================================================

    async def list_prompts(self) -> List[types.Prompt]:
        prompts: List[types.Prompt] = []
        for template in self._registry.list_all(ComponentKind.template):
            schema = derive_schema(template)
            arguments = [
                types.PromptArgument(
                    name=arg_name,
                    description=prop.description,
                    required=arg_name in schema.required,
                )
                for arg_name, prop in schema.properties.items()
            ]
            prompts.append(types.Prompt(name=template.name, description=template.description, arguments=arguments))
        return prompts

    async def get_prompt(self, name: str, arguments: Optional[Dict[str, str]]) -> types.GetPromptResult:
        envelope = self._dispatcher.render_template(name, arguments or {})
        template = self._registry.lookup_template(name)
        description = template.description if template is not None else None
        return types.GetPromptResult(
            description=description,
            messages=[
                types.PromptMessage(
                    role="assistant",
                    content=types.TextContent(type="text", text=envelope.message),
                )
            ],
        )
