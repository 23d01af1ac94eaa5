"""Markdown documentation served as an MCP resource.

URIs take the form ``mcp://factory/documentation/<topic>``. An unknown topic is
still a successful read: the content lists the topics that do exist.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from mcp_server_factory.core.logging_config import get_logger

from ..schemas.domain import ResourceContent
from .base import DataProvider

logger = get_logger(__name__)

DOCUMENTATION_PREFIX = "mcp://factory/documentation/"

DOCUMENTATION_TOPICS: Dict[str, str] = {
    "getting-started": """# Getting Started with MCP

The Model Context Protocol (MCP) lets AI assistants work with external systems
through a small set of primitives:

- **Tools** perform actions.
- **Resources** provide data.
- **Prompts** generate guided responses.

## Setting up a server

1. Create a Python project and add the `mcp` package as a dependency.
2. Create a server object and register handlers for tools, resources and prompts.
3. Run it over the stdio transport.
4. Point your MCP client at the command that starts the server.

## Next steps

- Read `mcp://factory/documentation/best-practices`.
- Ask the `tool_implementation_guide` prompt for a worked example.
- Ask the `bootstrap_mcp_server` prompt to scaffold a new project.
""",
    "best-practices": """# MCP Best Practices

## General

- Give every tool, resource and prompt a clear name and description.
- Keep the server stateless where you can.
- Log to stderr. With the stdio transport, stdout carries the protocol.

## Tools

- Describe inputs with a JSON Schema and validate them before doing any work.
- Report failures as error results with a readable message.
- Keep tools idempotent when possible.

## Resources

- Use stable, descriptive URIs and advertise templates for families of URIs.
- Set an accurate MIME type.
- Never change state while serving a read.

## Prompts

- Provide defaults for optional arguments.
- Keep generated text focused on one task.
""",
    "troubleshooting": """# MCP Troubleshooting Guide

## Server not starting

- Run the server command by hand and read its stderr output.
- Check that the Python environment has the project installed.

## Client cannot connect

- Verify the command and arguments in the client's MCP settings.
- Make sure nothing else writes to stdout.

## Tool not found

- List the server's tools and compare names exactly.
- Restart the client after changing the server.

## Resource not found

- Check the URI against the advertised templates.
- Read a known topic, e.g. `mcp://factory/documentation/getting-started`.

## Prompt fails

- Check argument names and values against the prompt's declared arguments.
""",
}


class DocumentationProvider(DataProvider):
    name = "documentation"
    description = "Provides documentation on MCP topics"
    uri_pattern = r"mcp://factory/documentation/([^/]+)"
    uri_template = DOCUMENTATION_PREFIX + "{topic}"
    mime_type = "text/markdown"

    def read(self, uri: str) -> Optional[ResourceContent]:
        logger.info(f"Reading documentation resource: {uri}")
        match = self.match(uri)
        if match is None:
            logger.warning(f"URI does not match documentation pattern: {uri}")
            return None

        topic = match.group(1)
        content = DOCUMENTATION_TOPICS.get(topic)
        if content is None:
            logger.warning(f"Documentation not found for topic: {topic}")
            content = f"Unknown topic: {topic}. Available topics: {', '.join(DOCUMENTATION_TOPICS)}"
        return ResourceContent(uri=uri, mime_type=self.mime_type, content=content)

    def known_uris(self) -> List[str]:
        return [DOCUMENTATION_PREFIX + topic for topic in DOCUMENTATION_TOPICS]
