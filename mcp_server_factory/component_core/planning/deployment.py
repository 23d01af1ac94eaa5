"""Deployment plan for a locally installed Python MCP server.

Every step is critical: a failing command must abort the whole deployment, so
each instruction ends with an explicit exit-code check.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .base import PlannerAction
from .models import Effort, Priority, StepSpec, TaskPlan, build_plan, linear

DEFAULT_SERVER_NAME = "mcp-server-factory"

DEPLOYMENT_SUMMARY = (
    "This task plan provides a streamlined approach to deploying a local MCP server. It covers cleaning, "
    "building, testing, packaging, deployment to a standardized location, and verification. Each step "
    "includes error checking to abort the process if any step fails. Following this plan will result in a "
    "properly deployed MCP server that can be used with AI assistants."
)


def _critical(command: str, what: str) -> str:
    return (
        f"CRITICAL STEP: {what}\n"
        "THIS STEP MUST SUCCEED OR THE ENTIRE DEPLOYMENT PROCESS WILL BE ABORTED.\n\n"
        "```bash\n"
        f"{command}\n"
        "if [ $? -ne 0 ]; then\n"
        '    echo "CRITICAL FAILURE: aborting deployment." >&2\n'
        "    exit 1\n"
        "fi\n"
        "```\n\n"
        "Do not continue with any further step if this one fails."
    )


def deployment_steps(server_name: str) -> List[StepSpec]:
    install_dir = f"$HOME/mcp-server/{server_name}"
    return linear(
        [
            StepSpec(
                description="Clean the project",
                instruction=_critical("rm -rf build dist *.egg-info", "Remove previous build artifacts."),
                effort=Effort.low,
                priority=Priority.critical,
            ),
            StepSpec(
                description="Build the project",
                instruction=_critical(
                    "python -m pip install -e '.[test]'", "Install the project and its test dependencies."
                ),
                effort=Effort.medium,
                priority=Priority.critical,
            ),
            StepSpec(
                description="Run tests",
                instruction=_critical("python -m pytest", "Run the full test suite."),
                effort=Effort.medium,
                priority=Priority.critical,
            ),
            StepSpec(
                description="Package the project",
                instruction=_critical("python -m build --wheel", "Build a wheel into dist/."),
                effort=Effort.medium,
                priority=Priority.critical,
            ),
            StepSpec(
                description="Deploy the MCP server",
                instruction=_critical(
                    f'python -m venv "{install_dir}" && "{install_dir}/bin/pip" install dist/*.whl',
                    f"Install the wheel into a dedicated virtual environment at {install_dir}.",
                ),
                effort=Effort.medium,
                priority=Priority.critical,
            ),
            StepSpec(
                description="Update MCP settings",
                instruction=(
                    "CRITICAL STEP: Register the server with your MCP client.\n\n"
                    "Add this entry to the client's MCP settings file:\n\n"
                    "```json\n"
                    f'"{server_name}": {{\n'
                    f'  "command": "{install_dir}/bin/{server_name}",\n'
                    '  "args": [],\n'
                    '  "disabled": false\n'
                    "}\n"
                    "```\n\n"
                    "Abort the deployment if the settings file cannot be written."
                ),
                effort=Effort.low,
                priority=Priority.critical,
            ),
            StepSpec(
                description="Verify the deployment",
                instruction=_critical(
                    f'test -x "{install_dir}/bin/{server_name}"',
                    "Check the installed entry point, then restart the client and call the ping tool.",
                ),
                effort=Effort.low,
                priority=Priority.critical,
            ),
        ]
    )


class LocalMcpDeploymentPlanner(PlannerAction):
    """
    Plan the build-test-install cycle for a local MCP server.

    ``context["serverName"]`` overrides the name used for the install directory
    and the client settings entry.
    """

    name = "local_mcp_deployment_planner"
    description = "Generates a task plan for deploying local MCP servers"

    def analyze(self, objective: str, context: Dict[str, Any]) -> TaskPlan:
        server_name = str(context.get("serverName") or DEFAULT_SERVER_NAME)
        specs = [
            spec.model_copy(update={"is_critical": True, "abort_on_failure": True})
            for spec in deployment_steps(server_name)
        ]
        return build_plan(objective, DEPLOYMENT_SUMMARY, specs)
