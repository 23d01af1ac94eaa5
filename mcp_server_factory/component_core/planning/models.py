from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, model_validator

from ..schemas.base import BaseSchema, WireSchema


class Effort(str, Enum):
    low = "Low"
    medium = "Medium"
    high = "High"


class Priority(str, Enum):
    low = "Low"
    medium = "Medium"
    high = "High"
    critical = "Critical"


class StepMetadata(WireSchema):
    estimated_effort: Effort
    priority: Priority
    dependencies: List[str] = Field(default_factory=list)
    is_critical: Optional[bool] = None
    abort_on_failure: Optional[bool] = None


class TaskStep(BaseSchema):
    description: str
    instruction: str
    metadata: StepMetadata


class TaskPlan(BaseSchema):
    """
    An ordered, non-empty list of steps toward an objective.

    Step descriptions are unique and act as dependency keys. A step may only
    depend on steps that come before it, so the dependency graph is acyclic by
    construction.
    """

    objective: str
    summary: str
    steps: List[TaskStep]

    @model_validator(mode="after")
    def _check_steps(self) -> "TaskPlan":
        if not self.steps:
            raise ValueError("a task plan needs at least one step")
        seen: set[str] = set()
        for step in self.steps:
            if step.description in seen:
                raise ValueError(f"duplicate step description: '{step.description}'")
            unknown = [d for d in step.metadata.dependencies if d not in seen]
            if unknown:
                raise ValueError(f"step '{step.description}' depends on unknown or later steps: {unknown}")
            seen.add(step.description)
        return self

    def detailed_summary(self) -> str:
        """Objective, summary and a numbered step listing as one text block."""
        lines = [f"Objective: {self.objective}", "", f"Summary: {self.summary}", "", "Steps:"]
        lines.extend(f"{i}. {step.description}" for i, step in enumerate(self.steps, start=1))
        return "\n".join(lines) + "\n"

    def to_result_data(self) -> Dict[str, Any]:
        """Wire form returned as the planner's result data."""
        return {
            "objective": self.objective,
            "summary": self.summary,
            "steps": [step.model_dump(mode="json", by_alias=True, exclude_none=True) for step in self.steps],
            "detailedSummary": self.detailed_summary(),
        }


class StepSpec(BaseSchema):
    """Compact step declaration used by planners to build plans."""

    description: str
    instruction: str
    effort: Effort
    priority: Priority
    dependencies: List[str] = Field(default_factory=list)
    is_critical: Optional[bool] = None
    abort_on_failure: Optional[bool] = None

    def to_step(self) -> TaskStep:
        return TaskStep(
            description=self.description,
            instruction=self.instruction,
            metadata=StepMetadata(
                estimated_effort=self.effort,
                priority=self.priority,
                dependencies=list(self.dependencies),
                is_critical=self.is_critical,
                abort_on_failure=self.abort_on_failure,
            ),
        )


def build_plan(objective: str, summary: str, specs: List[StepSpec]) -> TaskPlan:
    return TaskPlan(objective=objective, summary=summary, steps=[spec.to_step() for spec in specs])


def linear(specs: List[StepSpec]) -> List[StepSpec]:
    """Chain steps so each depends on the one before it."""
    out: List[StepSpec] = []
    previous: Optional[str] = None
    for spec in specs:
        deps = [previous] if previous is not None else []
        out.append(spec.model_copy(update={"dependencies": deps}))
        previous = spec.description
    return out
