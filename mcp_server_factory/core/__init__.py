"""
Core utilities for the MCP server factory.

This package provides logging configuration and the shared error taxonomy
used by the component registry, the dispatcher and the protocol adapter.
"""

from mcp_server_factory.core.errors import (
    ComponentError,
    ComponentNotFoundError,
    DelegateNotFoundError,
    ParameterValidationError,
    RegistryFrozenError,
)
from mcp_server_factory.core.logging_config import get_logger, setup_logging

__all__ = [
    "ComponentError",
    "ComponentNotFoundError",
    "DelegateNotFoundError",
    "ParameterValidationError",
    "RegistryFrozenError",
    "get_logger",
    "setup_logging",
]
