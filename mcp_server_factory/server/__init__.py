"""
MCP Server Package.

Subpackages and modules:
    core: Configuration settings.
    adapter: Translation between the component core and MCP wire types.
    app: Lowlevel MCP server assembly and the stdio lifecycle.
    main: Console entry point.
"""
