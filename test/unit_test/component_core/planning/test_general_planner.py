from __future__ import annotations

from typing import Any, Dict

import pytest

from mcp_server_factory.component_core.capabilities.registry import ComponentRegistry
from mcp_server_factory.component_core.planning.general import (
    GeneralTaskPlanner,
    ObjectiveCategory,
    classify,
)
from mcp_server_factory.component_core.planning.models import Effort, Priority, StepSpec, TaskPlan, build_plan
from mcp_server_factory.component_core.planning.planners import CodeCleanupPlanner, FeatureImplementationPlanner


class TestClassify:
    @pytest.mark.parametrize(
        "objective,expected",
        [
            ("Clean up the code", ObjectiveCategory.code_cleanup),
            ("REFACTOR the legacy Code base", ObjectiveCategory.code_cleanup),
            ("Add a new feature for export", ObjectiveCategory.feature_implementation),
            ("develop the search feature", ObjectiveCategory.feature_implementation),
            ("Fix the login bug", ObjectiveCategory.bug_fix),
            ("Troubleshoot a nasty bug", ObjectiveCategory.bug_fix),
            ("Write the quarterly report", ObjectiveCategory.generic),
            ("bug in the code", ObjectiveCategory.generic),
        ],
    )
    def test_categories(self, objective, expected):
        assert classify(objective) is expected

    @pytest.mark.parametrize("objective", ["please fix\nthe code", "add\na feature", "debug\nthe bug"])
    def test_keywords_split_across_lines_fall_through(self, objective):
        assert classify(objective) is ObjectiveCategory.generic

    def test_any_newline_makes_the_objective_generic(self):
        assert classify("Sprint goal:\nrefactor the parser code") is ObjectiveCategory.generic

    def test_first_match_wins(self):
        # Matches both the code-cleanup and the bug-fix rule
        assert classify("fix the bug in this code") is ObjectiveCategory.code_cleanup


class TestGeneralTaskPlanner:
    @pytest.fixture
    def registry(self) -> ComponentRegistry:
        registry = ComponentRegistry()
        registry.register(CodeCleanupPlanner())
        registry.register(FeatureImplementationPlanner())
        return registry

    @pytest.mark.parametrize(
        "objective,first_step",
        [
            ("Clean up the code", "Analyze the codebase"),
            ("Implement the export feature", "Analyze requirements"),
            ("Fix the login bug", "Reproduce the bug"),
            ("Plan a team offsite", "Analyze the objective"),
        ],
    )
    def test_first_step_by_category(self, registry, objective, first_step):
        result = GeneralTaskPlanner(registry).execute({"objective": objective})

        assert result.success
        assert result.data["steps"][0]["description"] == first_step
        assert result.data["objective"] == objective

    def test_bug_fix_plan(self, registry):
        steps = GeneralTaskPlanner(registry).execute({"objective": "debug the crash bug"}).data["steps"]

        assert [s["description"] for s in steps] == [
            "Reproduce the bug",
            "Analyze the bug",
            "Fix the bug",
            "Test the fix",
            "Document the fix",
        ]

    def test_generic_plan_is_linear(self, registry):
        steps = GeneralTaskPlanner(registry).execute({"objective": "Plan a team offsite"}).data["steps"]

        assert len(steps) == 6
        for previous, step in zip(steps, steps[1:]):
            assert step["metadata"]["dependencies"] == [previous["description"]]

    def test_missing_delegate_is_a_failure(self):
        result = GeneralTaskPlanner(ComponentRegistry()).execute({"objective": "Clean up the code"})

        assert not result.success
        assert result.message.startswith("Failed to generate task plan: ")
        assert "code_cleanup_planner" in result.message

    def test_delegate_is_resolved_at_call_time(self, registry):
        class ReplacementPlanner(CodeCleanupPlanner):
            def analyze(self, objective: str, context: Dict[str, Any]) -> TaskPlan:
                spec = StepSpec(description="Replaced", instruction="x", effort=Effort.low, priority=Priority.low)
                return build_plan(objective, "replaced", [spec])

        planner = GeneralTaskPlanner(registry)
        registry.register(ReplacementPlanner())

        steps = planner.execute({"objective": "Clean up the code"}).data["steps"]

        assert [s["description"] for s in steps] == ["Replaced"]
