from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import pytest

from mcp_server_factory.component_core.capabilities.base import Action, DataProvider, Template
from mcp_server_factory.component_core.capabilities.registry import ComponentRegistry
from mcp_server_factory.component_core.schemas.domain import (
    ComponentKind,
    ResourceContent,
    ResultEnvelope,
    TemplateResponse,
)
from mcp_server_factory.core.errors import ComponentNotFoundError, RegistryFrozenError

REGISTRY_LOGGER = "mcp_server_factory.component_core.capabilities.registry"


class EchoAction(Action):
    name = "echo"
    description = "Echo parameters back"

    def execute(self, parameters: Mapping[str, Any]) -> ResultEnvelope:
        return ResultEnvelope.ok("echo", dict(parameters))


class OtherEchoAction(EchoAction):
    description = "Another echo"


class GreetingTemplate(Template):
    name = "echo"
    description = "Same name as the action, different kind"

    def render(self, parameters: Mapping[str, Any]) -> TemplateResponse:
        return TemplateResponse(content="hello")


class WideProvider(DataProvider):
    name = "wide"
    description = "Matches anything under mcp://test/"
    uri_pattern = r"mcp://test/.+"

    def read(self, uri: str) -> Optional[ResourceContent]:
        return ResourceContent(uri=uri, content="wide")


class NarrowProvider(DataProvider):
    name = "narrow"
    description = "Matches one URI family"
    uri_pattern = r"mcp://test/narrow/([^/]+)"

    def read(self, uri: str) -> Optional[ResourceContent]:
        return ResourceContent(uri=uri, content="narrow")


@pytest.fixture
def empty_registry() -> ComponentRegistry:
    return ComponentRegistry()


class TestRegisterAndLookup:
    def test_lookup_returns_the_registered_instance(self, empty_registry):
        action = EchoAction()
        empty_registry.register(action)

        assert empty_registry.lookup(ComponentKind.action, "echo") is action
        assert empty_registry.lookup_action("echo") is action
        assert empty_registry.get(ComponentKind.action, "echo") is action
        assert empty_registry.has(ComponentKind.action, "echo")

    def test_absence_is_not_an_error(self, empty_registry):
        assert empty_registry.lookup(ComponentKind.action, "missing") is None
        assert empty_registry.lookup_template("missing") is None
        assert not empty_registry.has(ComponentKind.action, "missing")

    def test_get_raises_for_missing(self, empty_registry):
        with pytest.raises(ComponentNotFoundError, match="Action not found: missing"):
            empty_registry.get(ComponentKind.action, "missing")

    def test_kinds_have_separate_namespaces(self, empty_registry):
        action = EchoAction()
        template = GreetingTemplate()
        empty_registry.register(action)
        empty_registry.register(template)

        assert empty_registry.lookup_action("echo") is action
        assert empty_registry.lookup_template("echo") is template

    def test_providers_are_keyed_by_pattern(self, empty_registry):
        provider = NarrowProvider()
        empty_registry.register(provider)

        assert empty_registry.lookup_provider(NarrowProvider.uri_pattern) is provider
        assert empty_registry.lookup_provider("narrow") is None

    def test_list_all_keeps_registration_order(self, empty_registry):
        wide, narrow = WideProvider(), NarrowProvider()
        empty_registry.register(wide)
        empty_registry.register(narrow)

        assert empty_registry.list_all(ComponentKind.data_provider) == [wide, narrow]
        assert empty_registry.list_all(ComponentKind.action) == []


class TestDuplicateRegistration:
    def test_last_write_wins_with_warning(self, empty_registry, caplog):
        first, second = EchoAction(), OtherEchoAction()
        empty_registry.register(first)

        with caplog.at_level(logging.WARNING, logger=REGISTRY_LOGGER):
            empty_registry.register(second)

        assert empty_registry.lookup_action("echo") is second
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING and r.name == REGISTRY_LOGGER]
        assert len(warnings) == 1
        assert "echo" in warnings[0].getMessage()

    def test_first_registration_does_not_warn(self, empty_registry, caplog):
        with caplog.at_level(logging.WARNING, logger=REGISTRY_LOGGER):
            empty_registry.register(EchoAction())

        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


class TestMatchProvider:
    def test_first_match_in_registration_order(self, empty_registry):
        wide, narrow = WideProvider(), NarrowProvider()
        empty_registry.register(wide)
        empty_registry.register(narrow)

        assert empty_registry.match_provider("mcp://test/narrow/a") is wide

    def test_order_is_observable(self, empty_registry):
        wide, narrow = WideProvider(), NarrowProvider()
        empty_registry.register(narrow)
        empty_registry.register(wide)

        assert empty_registry.match_provider("mcp://test/narrow/a") is narrow
        assert empty_registry.match_provider("mcp://test/other") is wide

    def test_pattern_must_match_whole_uri(self, empty_registry):
        empty_registry.register(NarrowProvider())

        assert empty_registry.match_provider("mcp://test/narrow/a/b") is None
        assert empty_registry.match_provider("prefix-mcp://test/narrow/a") is None

    def test_no_match(self, empty_registry):
        empty_registry.register(NarrowProvider())

        assert empty_registry.match_provider("file:///etc/hosts") is None


class TestFreeze:
    def test_register_after_freeze_raises(self, empty_registry):
        empty_registry.register(EchoAction())
        empty_registry.freeze()

        assert empty_registry.frozen
        with pytest.raises(RegistryFrozenError):
            empty_registry.register(OtherEchoAction())
        assert isinstance(empty_registry.lookup_action("echo"), EchoAction)
        assert not isinstance(empty_registry.lookup_action("echo"), OtherEchoAction)

    def test_reads_still_work_after_freeze(self, empty_registry):
        action = EchoAction()
        empty_registry.register(action)
        empty_registry.freeze()

        assert empty_registry.lookup_action("echo") is action
