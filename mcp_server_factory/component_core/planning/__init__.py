"""Task planners.

Each planner is an ``Action`` that turns an objective into a ``TaskPlan``: an
ordered list of steps where every dependency names an earlier step.
``GeneralTaskPlanner`` classifies the objective and may hand it to one of the
specific planners through the registry.
"""

from .base import PlannerAction, PlannerInput
from .deployment import LocalMcpDeploymentPlanner
from .general import GeneralTaskPlanner, ObjectiveCategory, classify
from .models import Effort, Priority, StepMetadata, TaskPlan, TaskStep
from .planners import CleanupTaskPlanner, CodeCleanupPlanner, FeatureImplementationPlanner

__all__ = [
    "CleanupTaskPlanner",
    "CodeCleanupPlanner",
    "Effort",
    "FeatureImplementationPlanner",
    "GeneralTaskPlanner",
    "LocalMcpDeploymentPlanner",
    "ObjectiveCategory",
    "PlannerAction",
    "PlannerInput",
    "Priority",
    "StepMetadata",
    "TaskPlan",
    "TaskStep",
    "classify",
]
