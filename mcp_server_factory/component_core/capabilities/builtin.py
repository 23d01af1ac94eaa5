from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import Field

from mcp_server_factory.core.errors import ParameterValidationError
from mcp_server_factory.core.logging_config import get_logger

from ..schemas.domain import ResultEnvelope
from .base import Action, ParametersModel, parse_parameters

logger = get_logger(__name__)


class PingParameters(ParametersModel):
    message: Optional[str] = Field(default=None, description="Optional message to echo back")


class PingAction(Action):
    """
    Liveness check.

    Always succeeds. The text result carries the local ISO timestamp and echoes
    ``message`` when one is given.
    """

    name = "ping"
    description = "Responds to ping requests to check server availability"
    parameters_model = PingParameters

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock

    def execute(self, parameters: Mapping[str, Any]) -> ResultEnvelope:
        logger.info(f"Executing ping with parameters: {dict(parameters)}")
        params = parse_parameters(PingParameters, parameters)
        message = params.message or None
        timestamp = self._clock().isoformat()

        text = f"PONG! Server is alive and responsive.\nTimestamp: {timestamp}\n"
        if message:
            text += f"Message: {message}\n"

        return ResultEnvelope.ok(text, {"status": "ok", "timestamp": timestamp, "message": message})


CONCEPT_EXPLANATIONS: Dict[str, str] = {
    "tool": """# MCP Tool

A tool is an executable function exposed by an MCP server. The client sends
named parameters, the server runs the tool and answers with a result that is
either a success carrying output or a failure carrying an error message.

## Key characteristics

1. **Input parameters** are described by a JSON Schema so clients can build valid calls.
2. **Execution logic** performs a computation or side effect.
3. **Result** reports success or failure plus any output data.

## Implementing a tool

1. Declare the input parameters.
2. Implement the execution logic.
3. Register the tool with the server.

Validate every input and report errors as results instead of raising them.
""",
    "resource": """# MCP Resource

A resource is a read-only data source addressed by a URI. Servers advertise
concrete resources and URI templates; clients read them to pull context such as
documentation, files or configuration.

## Key characteristics

1. **URI addressing**: each resource (or family of resources) has a URI or URI template.
2. **Content**: reads return text or binary data with a MIME type.
3. **No side effects**: reading a resource must not change server state.
""",
    "prompt": """# MCP Prompt

A prompt is a reusable template that turns a few arguments into structured
messages. Clients list prompts, fill in the arguments and receive ready-made
text, typically guides or instructions.

## Key characteristics

1. **Arguments** are named, documented and may be optional with defaults.
2. **Messages** are the rendered output, tagged with a role.
3. **Metadata** can accompany the messages.
""",
    "server": """# MCP Server

A server is a program that offers tools, resources and prompts to clients over
an MCP transport such as stdio or HTTP.

## Responsibilities

1. Advertise its capabilities during initialization.
2. Answer list requests for tools, resources and prompts.
3. Execute tool calls, serve resource reads and render prompts.
4. Report failures as protocol results rather than crashing.
""",
    "client": """# MCP Client

A client is a program, usually an AI assistant host, that connects to one or
more MCP servers and uses their tools, resources and prompts.

## Responsibilities

1. Start or connect to servers and negotiate capabilities.
2. Discover what each server offers.
3. Call tools, read resources and fetch prompts on behalf of the model.
""",
}


class ExplainConceptParameters(ParametersModel):
    concept: str = Field(
        description="The MCP concept to explain",
        json_schema_extra={"enum": list(CONCEPT_EXPLANATIONS)},
    )


class ExplainConceptAction(Action):
    """Look up a markdown explanation of an MCP concept (case-insensitive)."""

    name = "explain_concept"
    description = "Provides a detailed explanation of an MCP concept"
    parameters_model = ExplainConceptParameters

    def execute(self, parameters: Mapping[str, Any]) -> ResultEnvelope:
        logger.info(f"Executing explain_concept with parameters: {dict(parameters)}")
        try:
            params = parse_parameters(ExplainConceptParameters, parameters)
        except ParameterValidationError as e:
            return ResultEnvelope.fail(str(e))

        concept = params.concept.lower()
        explanation = CONCEPT_EXPLANATIONS.get(concept)
        if explanation is None:
            return ResultEnvelope.fail(
                f"Unknown concept: {concept}",
                f"Available concepts: {', '.join(CONCEPT_EXPLANATIONS)}",
            )
        return ResultEnvelope.ok("Explanation retrieved successfully", explanation)
