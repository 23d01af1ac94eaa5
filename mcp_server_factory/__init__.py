"""MCP Server Factory.

This package exposes a catalog of named capabilities to MCP clients over the
Model Context Protocol.

High-level architecture
-----------------------

- **Actions** (MCP tools): invoked with parameters, answer with a result
  envelope. The built-in set includes ``ping``, ``explain_concept`` and the task
  planners.
- **DataProviders** (MCP resources): serve content for URIs matching a pattern,
  e.g. the ``mcp://factory/documentation/<topic>`` pages.
- **Templates** (MCP prompts): render guides from parameters.

Core subpackages
----------------

- ``mcp_server_factory.component_core``: capability kinds, the registry, schema
  derivation, the dispatcher and the built-in capabilities.
- ``mcp_server_factory.server``: the protocol adapter onto ``mcp`` wire types
  and the stdio server lifecycle.
- ``mcp_server_factory.core``: logging configuration and the error taxonomy.
"""
