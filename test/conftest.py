from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from mcp_server_factory.component_core.capabilities.registry import ComponentRegistry
from mcp_server_factory.component_core.dispatch import Dispatcher
from mcp_server_factory.component_core.wiring import build_default_registry


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo handler changes made by ``setup_logging`` so later tests log normally."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """An empty directory standing in for the project being bootstrapped."""
    return tmp_path


@pytest.fixture
def registry(project_root: Path) -> ComponentRegistry:
    """The built-in capability set, frozen as at server startup."""
    return build_default_registry(project_root=project_root)


@pytest.fixture
def dispatcher(registry: ComponentRegistry) -> Dispatcher:
    return Dispatcher(registry)
