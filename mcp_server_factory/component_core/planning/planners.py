from __future__ import annotations

from typing import Any, Dict

from .base import PlannerAction
from .models import Effort, Priority, StepSpec, TaskPlan, build_plan, linear

ANALYZE_CODEBASE = "Analyze the codebase"

CODE_CLEANUP_STEPS = [
    StepSpec(
        description=ANALYZE_CODEBASE,
        instruction=(
            "Survey the code before changing it:\n\n"
            "1. Run the linters and type checker and collect their findings\n"
            "2. Look for duplicated logic, unclear names and missing docstrings\n"
            "3. Note slow paths reported by profiling or by users\n"
            "4. Make sure the test suite passes so regressions can be detected"
        ),
        effort=Effort.medium,
        priority=Priority.high,
    ),
    StepSpec(
        description="Fix code style issues",
        instruction="Apply the project's formatter and fix the remaining linter warnings by hand.",
        effort=Effort.medium,
        priority=Priority.medium,
        dependencies=[ANALYZE_CODEBASE],
    ),
    StepSpec(
        description="Refactor duplicate code",
        instruction="Extract repeated logic into shared functions or classes and replace the copies with calls.",
        effort=Effort.high,
        priority=Priority.high,
        dependencies=[ANALYZE_CODEBASE],
    ),
    StepSpec(
        description="Improve naming conventions",
        instruction="Rename unclear variables, functions and modules so names state what they hold or do.",
        effort=Effort.medium,
        priority=Priority.medium,
        dependencies=[ANALYZE_CODEBASE],
    ),
    StepSpec(
        description="Add missing documentation",
        instruction="Add docstrings to public modules, classes and functions, and update the README.",
        effort=Effort.high,
        priority=Priority.medium,
        dependencies=[ANALYZE_CODEBASE],
    ),
    StepSpec(
        description="Fix code smells",
        instruction="Split long functions, remove dead code and simplify deeply nested conditionals.",
        effort=Effort.high,
        priority=Priority.high,
        dependencies=[ANALYZE_CODEBASE, "Refactor duplicate code"],
    ),
    StepSpec(
        description="Optimize performance",
        instruction="Profile the hot paths found during analysis and fix the measurable bottlenecks.",
        effort=Effort.medium,
        priority=Priority.medium,
        dependencies=[ANALYZE_CODEBASE, "Fix code smells"],
    ),
    StepSpec(
        description="Verify changes",
        instruction="Run the full test suite and the linters again and review the diff before merging.",
        effort=Effort.medium,
        priority=Priority.high,
        dependencies=[
            "Fix code style issues",
            "Refactor duplicate code",
            "Improve naming conventions",
            "Add missing documentation",
            "Fix code smells",
            "Optimize performance",
        ],
    ),
]

CODE_CLEANUP_SUMMARY = (
    "This task plan provides a systematic approach to cleaning up the codebase. It starts with analyzing "
    "the current state of the code, then addresses various aspects of code quality including style, "
    "duplication, naming, documentation, code smells, and performance. Finally, it includes a verification "
    "step to ensure that the changes don't break existing functionality."
)


class CodeCleanupPlanner(PlannerAction):
    name = "code_cleanup_planner"
    description = "Generates a task plan for code cleanup objectives"

    def analyze(self, objective: str, context: Dict[str, Any]) -> TaskPlan:
        return build_plan(objective, CODE_CLEANUP_SUMMARY, CODE_CLEANUP_STEPS)


FEATURE_STEPS = [
    StepSpec(
        description="Analyze requirements",
        instruction=(
            "Pin down what the feature must do:\n\n"
            "1. List the functional requirements and acceptance criteria\n"
            "2. Identify the affected modules and public interfaces\n"
            "3. Clarify open questions with stakeholders"
        ),
        effort=Effort.medium,
        priority=Priority.high,
    ),
    StepSpec(
        description="Design the feature",
        instruction="Sketch the data model, interfaces and control flow, and check them against the requirements.",
        effort=Effort.medium,
        priority=Priority.high,
        dependencies=["Analyze requirements"],
    ),
    StepSpec(
        description="Implement the feature",
        instruction="Write the code following the design, in small reviewable commits.",
        effort=Effort.high,
        priority=Priority.high,
        dependencies=["Design the feature"],
    ),
    StepSpec(
        description="Write tests",
        instruction="Cover the normal path, edge cases and error handling with unit tests.",
        effort=Effort.medium,
        priority=Priority.high,
        dependencies=["Implement the feature"],
    ),
    StepSpec(
        description="Integrate with existing code",
        instruction="Wire the feature into the application, run the integration tests and fix conflicts.",
        effort=Effort.medium,
        priority=Priority.high,
        dependencies=["Implement the feature", "Write tests"],
    ),
    StepSpec(
        description="Document the feature",
        instruction="Update user documentation, docstrings and the changelog.",
        effort=Effort.medium,
        priority=Priority.medium,
        dependencies=["Implement the feature"],
    ),
    StepSpec(
        description="Review and refine",
        instruction="Get a code review, address the feedback and confirm the acceptance criteria are met.",
        effort=Effort.medium,
        priority=Priority.high,
        dependencies=[
            "Implement the feature",
            "Write tests",
            "Integrate with existing code",
            "Document the feature",
        ],
    ),
]

FEATURE_SUMMARY = (
    "This task plan provides a systematic approach to implementing a new feature. It starts with analyzing "
    "requirements and designing the feature, then moves on to implementation, testing, integration, and "
    "documentation. Finally, it includes a review step to ensure the feature meets the requirements and "
    "follows best practices."
)


class FeatureImplementationPlanner(PlannerAction):
    name = "feature_implementation_planner"
    description = "Generates a task plan for feature implementation objectives"

    def analyze(self, objective: str, context: Dict[str, Any]) -> TaskPlan:
        return build_plan(objective, FEATURE_SUMMARY, FEATURE_STEPS)


CLEANUP_STEPS = linear(
    [
        StepSpec(
            description="Analyze the current state",
            instruction=(
                "Take inventory of the current state, identify areas that need attention and "
                "record a baseline to compare against."
            ),
            effort=Effort.medium,
            priority=Priority.high,
        ),
        StepSpec(
            description="Identify items to clean up",
            instruction="List the concrete items to remove, archive or reorganize.",
            effort=Effort.medium,
            priority=Priority.high,
        ),
        StepSpec(
            description="Prioritize cleanup tasks",
            instruction="Order the items by impact and effort, starting with quick wins.",
            effort=Effort.low,
            priority=Priority.medium,
        ),
        StepSpec(
            description="Execute cleanup tasks",
            instruction="Work through the list in priority order, keeping backups of anything removed.",
            effort=Effort.high,
            priority=Priority.high,
        ),
        StepSpec(
            description="Verify cleanup",
            instruction="Compare against the baseline and confirm nothing still needed was lost.",
            effort=Effort.medium,
            priority=Priority.high,
        ),
    ]
)

CLEANUP_SUMMARY = (
    "This task plan provides a systematic approach to cleaning up. It starts with analyzing the current state, "
    "then identifies items to clean up, prioritizes the cleanup tasks, executes them, and finally verifies that "
    "the cleanup was successful."
)


class CleanupTaskPlanner(PlannerAction):
    name = "cleanup_task"
    description = "Generates a task plan for cleanup objectives"

    def analyze(self, objective: str, context: Dict[str, Any]) -> TaskPlan:
        return build_plan(objective, CLEANUP_SUMMARY, CLEANUP_STEPS)
