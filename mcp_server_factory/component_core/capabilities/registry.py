"""Component registry.

The registry maps names (and URI patterns) to capability implementations, one
map per ``ComponentKind``. The dispatcher resolves every invocation through it.

It is populated once at startup and then frozen; after that it is only read.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from mcp_server_factory.core.errors import ComponentNotFoundError, RegistryFrozenError
from mcp_server_factory.core.logging_config import get_logger

from ..schemas.domain import ComponentKind
from .base import Action, Capability, DataProvider, Template

logger = get_logger(__name__)


class ComponentRegistry:
    """
    In-memory mapping of capability keys to implementations.

    Actions and Templates are keyed by ``name``. DataProviders are keyed by
    ``uri_pattern`` and resolved by matching a URI against each pattern.

    Notes:
        - ``register`` overwrites an existing entry with the same key and logs a
          warning.
        - ``lookup`` returns ``None`` when nothing is registered; ``get`` raises
          ``ComponentNotFoundError``.
        - Python dicts keep insertion order, which is the provider match order.
    """

    def __init__(self) -> None:
        """Initialize an empty, unfrozen registry."""
        self._actions: Dict[str, Action] = {}
        self._templates: Dict[str, Template] = {}
        self._providers: Dict[str, DataProvider] = {}
        self._frozen = False

    def _table(self, kind: ComponentKind) -> Dict[str, Capability]:
        if kind is ComponentKind.action:
            return self._actions  # type: ignore[return-value]
        if kind is ComponentKind.template:
            return self._templates  # type: ignore[return-value]
        return self._providers  # type: ignore[return-value]

    @staticmethod
    def _key(cap: Capability) -> str:
        if cap.kind is ComponentKind.data_provider:
            return cap.uri_pattern  # type: ignore[union-attr]
        return cap.name

    def register(self, cap: Capability) -> None:
        """
        Register a capability implementation.

        Args:
            cap: The capability instance. Its ``kind`` decides which map it lands in.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
        """
        if self._frozen:
            raise RegistryFrozenError(cap.name)
        table = self._table(cap.kind)
        key = self._key(cap)
        if key in table:
            logger.warning(
                f"Duplicate {cap.kind.value} registration for '{key}': "
                f"{type(table[key]).__name__} replaced by {type(cap).__name__}"
            )
        else:
            logger.debug(f"Registered {cap.kind.value} '{key}' ({type(cap).__name__})")
        table[key] = cap

    def lookup(self, kind: ComponentKind, name: str) -> Optional[Capability]:
        """Return the capability registered under ``name``, or ``None``."""
        return self._table(kind).get(name)

    def get(self, kind: ComponentKind, name: str) -> Capability:
        """
        Retrieve a registered capability.

        Raises:
            ComponentNotFoundError: If nothing is registered under ``name``.
        """
        cap = self.lookup(kind, name)
        if cap is None:
            raise ComponentNotFoundError(kind.label, name)
        return cap

    def has(self, kind: ComponentKind, name: str) -> bool:
        return name in self._table(kind)

    def lookup_action(self, name: str) -> Optional[Action]:
        return self._actions.get(name)

    def lookup_template(self, name: str) -> Optional[Template]:
        return self._templates.get(name)

    def lookup_provider(self, uri_pattern: str) -> Optional[DataProvider]:
        return self._providers.get(uri_pattern)

    def match_provider(self, uri: str) -> Optional[DataProvider]:
        """
        Find the provider serving ``uri``.

        Returns:
            The first provider, in registration order, whose pattern matches the
            whole URI; ``None`` when no pattern matches.
        """
        for provider in self._providers.values():
            if provider.matches(uri):
                return provider
        return None

    def list_all(self, kind: ComponentKind) -> List[Capability]:
        """Every capability of ``kind``, in registration order."""
        return list(self._table(kind).values())

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True
        logger.info(
            f"Registry frozen: {len(self._actions)} actions, "
            f"{len(self._providers)} providers, {len(self._templates)} templates"
        )

    @property
    def frozen(self) -> bool:
        return self._frozen
