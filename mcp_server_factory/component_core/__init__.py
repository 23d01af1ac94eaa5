"""Component registry and dispatch layer.

Capabilities are registered once, described through derived parameter schemas,
looked up by name or URI and invoked through the ``Dispatcher``, which turns
every outcome into a ``ResultEnvelope`` or ``ReadResult``.
"""

from .capabilities import Action, Capability, ComponentRegistry, DataProvider, Template
from .dispatch import Dispatcher
from .wiring import build_default_registry

__all__ = [
    "Action",
    "Capability",
    "ComponentRegistry",
    "DataProvider",
    "Dispatcher",
    "Template",
    "build_default_registry",
]
