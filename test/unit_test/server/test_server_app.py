from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from mcp import types

from mcp_server_factory.server.adapter import McpProtocolAdapter
from mcp_server_factory.server.app import McpServerService, build_server
from mcp_server_factory.server.core.config import ServerInfoConfig, Settings
from mcp_server_factory.server.main import create_service, main


@pytest.fixture
def adapter(registry) -> McpProtocolAdapter:
    return McpProtocolAdapter(registry)


class TestBuildServer:
    def test_identity(self, adapter):
        server = build_server(adapter, ServerInfoConfig(name="factory-under-test", version="9.9.9"))

        assert server.name == "factory-under-test"
        assert server.version == "9.9.9"

    def test_registers_every_handler(self, adapter):
        server = build_server(adapter, ServerInfoConfig())

        for request_type in (
            types.ListToolsRequest,
            types.CallToolRequest,
            types.ListResourcesRequest,
            types.ListResourceTemplatesRequest,
            types.ReadResourceRequest,
            types.ListPromptsRequest,
            types.GetPromptRequest,
        ):
            assert request_type in server.request_handlers

    def test_advertises_capabilities(self, adapter):
        options = build_server(adapter, ServerInfoConfig()).create_initialization_options()

        assert options.capabilities.tools is not None
        assert options.capabilities.resources is not None
        assert options.capabilities.prompts is not None


class TestMcpServerService:
    def test_uses_settings_identity(self, adapter):
        service = McpServerService(adapter, Settings(MCP_FACTORY_SERVER_NAME="configured-name"))

        assert service.server.name == "configured-name"
        assert not service.running

    def test_stop_when_not_running_is_a_no_op(self, adapter):
        service = McpServerService(adapter, Settings())

        service.stop()

        assert not service.running

    def test_start_runs_serve_on_anyio(self, adapter):
        service = McpServerService(adapter, Settings())

        with patch("mcp_server_factory.server.app.anyio.run") as mock_run:
            service.start()

        mock_run.assert_called_once_with(service.serve)


class TestMain:
    def test_create_service_uses_frozen_default_registry(self):
        service = create_service()

        assert service.adapter.registry.frozen
        assert service.adapter.registry.lookup_action("ping") is not None

    def test_main_sets_up_logging_and_starts(self):
        mock_service = MagicMock()
        with patch("mcp_server_factory.server.main.setup_logging") as mock_setup:
            with patch("mcp_server_factory.server.main.create_service", return_value=mock_service):
                main()

        mock_setup.assert_called_once_with()
        mock_service.start.assert_called_once_with()

    def test_main_handles_keyboard_interrupt(self):
        mock_service = MagicMock()
        mock_service.start.side_effect = KeyboardInterrupt
        with patch("mcp_server_factory.server.main.setup_logging"):
            with patch("mcp_server_factory.server.main.create_service", return_value=mock_service):
                main()

        mock_service.start.assert_called_once_with()
