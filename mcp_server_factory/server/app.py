"""
MCP server assembly and stdio lifecycle.

``build_server`` registers the adapter's coroutines as handlers on the lowlevel
``mcp`` server. ``McpServerService`` owns that server and runs it over the
stdio transport until the client disconnects or ``stop`` is called.
"""

from __future__ import annotations

from typing import Optional

import anyio
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from mcp_server_factory.core.logging_config import get_logger
from mcp_server_factory.server.adapter import McpProtocolAdapter
from mcp_server_factory.server.core.config import ServerInfoConfig, Settings

logger = get_logger(__name__)


def build_server(adapter: McpProtocolAdapter, server_info: ServerInfoConfig) -> Server:
    server: Server = Server(server_info.name, version=server_info.version, instructions=server_info.instructions)

    server.list_tools()(adapter.list_tools)
    # Parameters are validated by the capabilities themselves
    server.call_tool(validate_input=False)(adapter.call_tool)
    server.list_resources()(adapter.list_resources)
    server.list_resource_templates()(adapter.list_resource_templates)
    server.read_resource()(adapter.read_resource)
    server.list_prompts()(adapter.list_prompts)
    server.get_prompt()(adapter.get_prompt)

    return server


class McpServerService:
    """Run the factory's MCP server over stdio."""

    def __init__(self, adapter: McpProtocolAdapter, settings: Settings) -> None:
        self._adapter = adapter
        self._server_info = settings.server
        self._server = build_server(adapter, self._server_info)
        self._cancel_scope: Optional[anyio.CancelScope] = None

    @property
    def adapter(self) -> McpProtocolAdapter:
        return self._adapter

    @property
    def server(self) -> Server:
        return self._server

    @property
    def running(self) -> bool:
        return self._cancel_scope is not None

    async def serve(self) -> None:
        """Serve a single client session on stdin/stdout."""
        if self.running:
            logger.warning("MCP server is already running")
            return

        logger.info(f"Starting MCP server {self._server_info.name} v{self._server_info.version} on stdio")
        with anyio.CancelScope() as scope:
            self._cancel_scope = scope
            try:
                async with stdio_server() as (read_stream, write_stream):
                    await self._server.run(
                        read_stream,
                        write_stream,
                        self._server.create_initialization_options(),
                    )
            finally:
                self._cancel_scope = None
        logger.info("MCP server stopped")

    def stop(self) -> None:
        if self._cancel_scope is None:
            logger.debug("stop() called while the MCP server is not running")
            return
        logger.info("Stopping MCP server")
        self._cancel_scope.cancel()

    def start(self) -> None:
        """Blocking entry point: run ``serve`` on a fresh event loop."""
        anyio.run(self.serve)
