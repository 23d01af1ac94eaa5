"""Objective classification and the general-purpose planner.

``GeneralTaskPlanner`` sorts an objective into a category with a small ordered
set of regular expressions. Two categories are handed to other registered
planners; the rest are planned here.

Delegates are resolved through the registry on every call, never constructed
inline, so a replaced or missing delegate is seen immediately.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Dict, List, Tuple

from mcp_server_factory.core.errors import ComponentNotFoundError, DelegateNotFoundError
from mcp_server_factory.core.logging_config import get_logger

from ..capabilities.registry import ComponentRegistry
from ..schemas.domain import ComponentKind
from .base import PlannerAction
from .models import Effort, Priority, StepSpec, TaskPlan, build_plan, linear

logger = get_logger(__name__)


class ObjectiveCategory(str, Enum):
    code_cleanup = "code_cleanup"
    feature_implementation = "feature_implementation"
    bug_fix = "bug_fix"
    generic = "generic"


_FLAGS = re.IGNORECASE

# Ordered: the first pattern matching the whole objective decides. `.` stops at
# newlines, so a multi-line objective is always generic.
CLASSIFICATION_RULES: List[Tuple[re.Pattern[str], ObjectiveCategory]] = [
    (re.compile(r".*(clean|refactor|improve|optimize|fix).*code.*", _FLAGS), ObjectiveCategory.code_cleanup),
    (re.compile(r".*(implement|add|create|develop).*feature.*", _FLAGS), ObjectiveCategory.feature_implementation),
    (re.compile(r".*(fix|resolve|debug|troubleshoot).*bug.*", _FLAGS), ObjectiveCategory.bug_fix),
]

DELEGATES: Dict[ObjectiveCategory, str] = {
    ObjectiveCategory.code_cleanup: "code_cleanup_planner",
    ObjectiveCategory.feature_implementation: "feature_implementation_planner",
}


def classify(objective: str) -> ObjectiveCategory:
    for pattern, category in CLASSIFICATION_RULES:
        if pattern.fullmatch(objective):
            return category
    return ObjectiveCategory.generic


BUG_FIX_STEPS = linear(
    [
        StepSpec(
            description="Reproduce the bug",
            instruction="Find a reliable way to trigger the bug and capture the exact inputs, environment and error.",
            effort=Effort.medium,
            priority=Priority.high,
        ),
        StepSpec(
            description="Analyze the bug",
            instruction="Trace the failure to its root cause using logs, a debugger or a failing test.",
            effort=Effort.high,
            priority=Priority.high,
        ),
        StepSpec(
            description="Fix the bug",
            instruction="Change the code at the root cause with the smallest correct fix.",
            effort=Effort.medium,
            priority=Priority.high,
        ),
        StepSpec(
            description="Test the fix",
            instruction="Add a regression test that failed before the fix and run the full suite.",
            effort=Effort.medium,
            priority=Priority.high,
        ),
        StepSpec(
            description="Document the fix",
            instruction="Describe the cause and the fix in the commit message and the changelog.",
            effort=Effort.low,
            priority=Priority.medium,
        ),
    ]
)

BUG_FIX_SUMMARY = (
    "This task plan provides a systematic approach to fixing a bug. It starts with reproducing and analyzing "
    "the bug, then moves on to implementing a fix, testing the fix, and documenting the changes."
)

GENERIC_STEPS = linear(
    [
        StepSpec(
            description="Analyze the objective",
            instruction="Break the objective into concrete outcomes and decide how success will be measured.",
            effort=Effort.medium,
            priority=Priority.high,
        ),
        StepSpec(
            description="Research and gather information",
            instruction="Collect the documentation, code and prior work relevant to the objective.",
            effort=Effort.medium,
            priority=Priority.high,
        ),
        StepSpec(
            description="Plan the approach",
            instruction="Choose an approach, list the work items and note the risks.",
            effort=Effort.medium,
            priority=Priority.high,
        ),
        StepSpec(
            description="Implement the solution",
            instruction="Carry out the work items in order, checking progress against the plan.",
            effort=Effort.high,
            priority=Priority.high,
        ),
        StepSpec(
            description="Test and verify",
            instruction="Confirm each outcome from the analysis step is met.",
            effort=Effort.medium,
            priority=Priority.high,
        ),
        StepSpec(
            description="Document the changes",
            instruction="Record what changed and why so others can follow up.",
            effort=Effort.medium,
            priority=Priority.medium,
        ),
    ]
)

GENERIC_SUMMARY = (
    "This task plan provides a general approach to accomplishing the objective. It starts with analyzing the "
    "objective and gathering information, then moves on to planning, implementation, testing, and documentation."
)


class GeneralTaskPlanner(PlannerAction):
    name = "general_task_planner"
    description = "Generates a task plan for general objectives"

    def __init__(self, registry: ComponentRegistry) -> None:
        self._registry = registry

    def _delegate(self, delegate_name: str) -> PlannerAction:
        try:
            delegate = self._registry.get(ComponentKind.action, delegate_name)
        except ComponentNotFoundError as e:
            raise DelegateNotFoundError(self.name, delegate_name) from e
        if not isinstance(delegate, PlannerAction):
            raise DelegateNotFoundError(self.name, delegate_name)
        return delegate

    def analyze(self, objective: str, context: Dict[str, Any]) -> TaskPlan:
        category = classify(objective)
        logger.debug(f"Objective classified as {category.value}: {objective!r}")

        delegate_name = DELEGATES.get(category)
        if delegate_name is not None:
            return self._delegate(delegate_name).analyze(objective, context)
        if category is ObjectiveCategory.bug_fix:
            return build_plan(objective, BUG_FIX_SUMMARY, BUG_FIX_STEPS)
        return build_plan(objective, GENERIC_SUMMARY, GENERIC_STEPS)
