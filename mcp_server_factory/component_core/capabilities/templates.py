"""Guide-generating templates (MCP prompts).

Both templates treat their parameters leniently: every parameter has a default,
and an unsupported choice renders an explanatory text rather than failing.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import Field

from mcp_server_factory.core.logging_config import get_logger

from ..schemas.domain import TemplateResponse
from .base import ParametersModel, Template, parse_parameters

logger = get_logger(__name__)

GUIDE_LANGUAGES = ("java", "typescript", "python")
BUILD_SYSTEMS = ("setuptools", "poetry", "detect")


def _class_name(tool_name: str) -> str:
    parts = tool_name.replace("-", "_").split("_")
    return "".join(p[:1].upper() + p[1:] for p in parts if p)


class ToolGuideParameters(ParametersModel):
    tool_name: str = Field(default="MyTool", alias="toolName", description="The name of the tool to implement")
    description: str = Field(
        default="A tool that does something useful", description="A description of what the tool does"
    )
    language: str = Field(
        default="java",
        description="The programming language to use",
        json_schema_extra={"enum": list(GUIDE_LANGUAGES)},
    )


class ToolImplementationGuideTemplate(Template):
    name = "tool_implementation_guide"
    description = "Provides a step-by-step guide for implementing an MCP tool"
    parameters_model = ToolGuideParameters

    def render(self, parameters: Mapping[str, Any]) -> TemplateResponse:
        logger.info(f"Rendering tool_implementation_guide with parameters: {dict(parameters)}")
        params = parse_parameters(ToolGuideParameters, parameters)
        language = params.language.lower()

        if language == "java":
            guide = self._java_guide(params.tool_name, params.description)
        elif language == "typescript":
            guide = self._typescript_guide(params.tool_name, params.description)
        elif language == "python":
            guide = self._python_guide(params.tool_name, params.description)
        else:
            return TemplateResponse(content=f"Unsupported language: {params.language}")

        return TemplateResponse(content=guide, metadata={"toolName": params.tool_name, "language": language})

    @staticmethod
    def _java_guide(tool_name: str, description: str) -> str:
        class_name = f"{_class_name(tool_name)}Tool"
        return f"""# Implementing the {tool_name} Tool in Java

{description}

## Step 1: Create the tool class

```java
public class {class_name} implements McpTool {{
    @Override
    public String getName() {{ return "{tool_name}"; }}

    @Override
    public String getDescription() {{ return "{description}"; }}
}}
```

## Step 2: Declare the input schema

Return a JSON Schema map from `getInputSchema()` listing every parameter and
which ones are required.

## Step 3: Implement `execute`

Validate the parameters first, then do the work and return a result object
carrying success, a message and any data.

## Step 4: Register the tool

Add an instance of `{class_name}` to the server's tool registry at startup.
"""

    @staticmethod
    def _typescript_guide(tool_name: str, description: str) -> str:
        return f"""# Implementing the {tool_name} Tool in TypeScript

{description}

## Step 1: Declare the tool

```typescript
server.tool(
  "{tool_name}",
  "{description}",
  {{ input: z.string().describe("Input for the tool") }},
  async ({{ input }}) => {{
    return {{ content: [{{ type: "text", text: `Processed: ${{input}}` }}] }};
  }}
);
```

## Step 2: Validate input

Describe every argument with `zod` so the SDK rejects malformed calls.

## Step 3: Report errors

Return `isError: true` with a readable message instead of throwing.

## Step 4: Test

Call the tool through an MCP client and check both the success and the error path.
"""

    @staticmethod
    def _python_guide(tool_name: str, description: str) -> str:
        class_name = f"{_class_name(tool_name)}Action"
        return f"""# Implementing the {tool_name} Tool in Python

{description}

## Step 1: Declare the parameters

```python
from pydantic import BaseModel, Field


class {class_name}Parameters(BaseModel):
    input: str = Field(description="Input for the tool")
```

## Step 2: Implement the action

```python
class {class_name}(Action):
    name = "{tool_name}"
    description = "{description}"
    parameters_model = {class_name}Parameters

    def execute(self, parameters):
        params = parse_parameters({class_name}Parameters, parameters)
        return ResultEnvelope.ok("Done", {{"echo": params.input}})
```

## Step 3: Register it

```python
registry.register({class_name}())
```

## Step 4: Test

Write a pytest case for a valid call and one for a missing parameter.
"""


class BootstrapParameters(ParametersModel):
    server_name: str = Field(default="my-mcp-server", alias="serverName", description="The name of the MCP server")
    package_name: str = Field(
        default="my_mcp_server", alias="packageName", description="The Python import package of the server"
    )
    description: str = Field(default="A Model Context Protocol server", description="A description of the server")
    build_system: str = Field(
        default="detect",
        alias="buildSystem",
        description="The build system to use (setuptools, poetry, or detect)",
        json_schema_extra={"enum": list(BUILD_SYSTEMS)},
    )


class BootstrapMcpServerTemplate(Template):
    """
    Scaffold for a new Python MCP server project.

    With ``buildSystem=detect`` the project root's ``pyproject.toml`` decides:
    a ``[tool.poetry]`` table means poetry, anything else setuptools. No
    ``pyproject.toml`` renders an error text.
    """

    name = "bootstrap_mcp_server"
    description = "Provides a template for creating a Python-based MCP server"
    parameters_model = BootstrapParameters

    def __init__(self, project_root: Optional[Path] = None) -> None:
        self._project_root = project_root

    @property
    def project_root(self) -> Path:
        if self._project_root is not None:
            return self._project_root
        from mcp_server_factory.server.core.config import settings

        return settings.project_root

    def detect_build_system(self) -> Optional[str]:
        pyproject = self.project_root / "pyproject.toml"
        if not pyproject.is_file():
            return None
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
        backend = data.get("build-system", {}).get("build-backend", "")
        if "poetry" in data.get("tool", {}) or backend.startswith("poetry"):
            return "poetry"
        return "setuptools"

    def render(self, parameters: Mapping[str, Any]) -> TemplateResponse:
        logger.info(f"Rendering bootstrap_mcp_server with parameters: {dict(parameters)}")
        params = parse_parameters(BootstrapParameters, parameters)

        build_system = params.build_system.lower()
        if build_system == "detect":
            detected = self.detect_build_system()
            if detected is None:
                return TemplateResponse(
                    content=(
                        "Error: No build system detected. This prompt requires a pyproject.toml "
                        f"in the project root ({self.project_root})."
                    )
                )
            logger.debug(f"Detected build system: {detected}")
            build_system = detected
        elif build_system not in BUILD_SYSTEMS:
            return TemplateResponse(content=f"Unsupported build system: {params.build_system}")

        content = "\n".join(
            [
                f"# Bootstrapping {params.server_name}",
                "",
                params.description,
                "",
                "## Directory structure",
                "",
                self._directory_structure(params.package_name),
                "## pyproject.toml",
                "",
                self._pyproject(params, build_system),
                "## Server entry point",
                "",
                self._server_module(params),
                "## Next steps",
                "",
                "1. Install the project in a virtual environment.",
                f"2. Run `{params.server_name}` and connect an MCP client over stdio.",
                "3. Add tools next to the `ping` example.",
            ]
        )
        return TemplateResponse(
            content=content,
            metadata={"serverName": params.server_name, "buildSystem": build_system},
        )

    @staticmethod
    def _directory_structure(package_name: str) -> str:
        return f"""```
.
├── pyproject.toml
├── {package_name}/
│   ├── __init__.py
│   └── server.py
└── test/
    └── test_server.py
```
"""

    @staticmethod
    def _pyproject(params: BootstrapParameters, build_system: str) -> str:
        if build_system == "poetry":
            return f"""```toml
[tool.poetry]
name = "{params.server_name}"
version = "0.1.0"
description = "{params.description}"
packages = [{{ include = "{params.package_name}" }}]

[tool.poetry.dependencies]
python = "^3.10"
mcp = "^1.18"

[tool.poetry.scripts]
{params.server_name} = "{params.package_name}.server:main"

[build-system]
requires = ["poetry-core"]
build-backend = "poetry.core.masonry.api"
```
"""
        return f"""```toml
[build-system]
requires = ["setuptools>=68"]
build-backend = "setuptools.build_meta"

[project]
name = "{params.server_name}"
version = "0.1.0"
description = "{params.description}"
requires-python = ">=3.10"
dependencies = ["mcp>=1.18"]

[project.scripts]
{params.server_name} = "{params.package_name}.server:main"
```
"""

    @staticmethod
    def _server_module(params: BootstrapParameters) -> str:
        return f"""```python
import anyio
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

server = Server("{params.server_name}")


@server.list_tools()
async def list_tools() -> list[types.Tool]:
    return [
        types.Tool(
            name="ping",
            description="Responds to ping requests",
            inputSchema={{"type": "object", "properties": {{}}}},
        )
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[types.TextContent]:
    return [types.TextContent(type="text", text="PONG!")]


async def _run() -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    anyio.run(_run)
```
"""
