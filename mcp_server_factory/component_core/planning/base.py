"""Shared execution contract for task planners.

Every planner is an ``Action`` that takes an ``objective`` (required) and an
optional ``context`` mapping, and answers with a ``TaskPlan``. Subclasses only
implement ``analyze``; validation, fault containment and result shaping live
here.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Dict, Mapping

from pydantic import BaseModel, Field

from mcp_server_factory.core.errors import ParameterValidationError
from mcp_server_factory.core.logging_config import get_logger

from ..capabilities.base import Action, ParametersModel, parse_parameters
from ..schemas.domain import ResultEnvelope
from .models import TaskPlan

logger = get_logger(__name__)

PLAN_SUCCESS_MESSAGE = "Task plan generated successfully"


class PlannerInput(ParametersModel):
    objective: str = Field(description="The objective to analyze and create a task plan for")
    context: Dict[str, Any] = Field(
        default_factory=dict, description="Additional context information for the task planning"
    )


class PlanResult(BaseModel):
    """Shape of a planner's result data, advertised for discovery."""

    objective: str
    summary: str
    steps: list
    detailed_summary: str = Field(alias="detailedSummary")


class PlannerAction(Action):
    parameters_model = PlannerInput
    result_model = PlanResult

    @abstractmethod
    def analyze(self, objective: str, context: Dict[str, Any]) -> TaskPlan:
        """Build the plan for ``objective``."""

    def execute(self, parameters: Mapping[str, Any]) -> ResultEnvelope:
        logger.info(f"Executing task planner '{self.name}' with parameters: {dict(parameters)}")
        try:
            params = parse_parameters(PlannerInput, parameters)
        except ParameterValidationError as e:
            logger.debug(f"Planner '{self.name}' rejected parameters: {e}")
            return ResultEnvelope.fail(str(e))

        try:
            plan = self.analyze(params.objective, params.context)
        except Exception as e:
            logger.warning(f"Failed to generate task plan: {e}")
            return ResultEnvelope.fail(f"Failed to generate task plan: {e}")

        logger.debug(f"Planner '{self.name}' produced {len(plan.steps)} steps")
        return ResultEnvelope.ok(PLAN_SUCCESS_MESSAGE, plan.to_result_data())
