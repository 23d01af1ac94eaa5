"""
Main Application Entry Point.

Configures logging, builds and freezes the default component registry and runs
the MCP server over stdio. Installed as the ``mcp-server-factory`` console
script.
"""

from mcp_server_factory.component_core.dispatch import Dispatcher
from mcp_server_factory.component_core.wiring import build_default_registry
from mcp_server_factory.core.logging_config import get_logger, setup_logging

from .adapter import McpProtocolAdapter
from .app import McpServerService
from .core.config import settings

logger = get_logger(__name__)


def create_service() -> McpServerService:
    registry = build_default_registry(project_root=settings.project_root)
    adapter = McpProtocolAdapter(registry, Dispatcher(registry))
    return McpServerService(adapter, settings)


def main() -> None:
    setup_logging()
    logger.info("Starting up MCP server factory...")
    service = create_service()
    try:
        service.start()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    logger.info("Shutting down MCP server factory...")


if __name__ == "__main__":
    main()
