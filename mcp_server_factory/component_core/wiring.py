"""Startup wiring for the built-in capability set."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .capabilities.builtin import ExplainConceptAction, PingAction
from .capabilities.documentation import DocumentationProvider
from .capabilities.registry import ComponentRegistry
from .capabilities.templates import BootstrapMcpServerTemplate, ToolImplementationGuideTemplate
from .planning.deployment import LocalMcpDeploymentPlanner
from .planning.general import GeneralTaskPlanner
from .planning.planners import CleanupTaskPlanner, CodeCleanupPlanner, FeatureImplementationPlanner


def build_default_registry(project_root: Optional[Path] = None, freeze: bool = True) -> ComponentRegistry:
    """
    Create a registry holding every built-in capability.

    Args:
        project_root: Directory the ``bootstrap_mcp_server`` template inspects
            when detecting the build system. Defaults to the configured root.
        freeze: Freeze the registry before returning it.
    """
    registry = ComponentRegistry()

    registry.register(PingAction())
    registry.register(ExplainConceptAction())
    registry.register(CodeCleanupPlanner())
    registry.register(FeatureImplementationPlanner())
    registry.register(GeneralTaskPlanner(registry))
    registry.register(CleanupTaskPlanner())
    registry.register(LocalMcpDeploymentPlanner())

    registry.register(DocumentationProvider())

    registry.register(ToolImplementationGuideTemplate())
    registry.register(BootstrapMcpServerTemplate(project_root))

    if freeze:
        registry.freeze()
    return registry
