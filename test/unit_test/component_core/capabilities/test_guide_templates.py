from __future__ import annotations

from pathlib import Path

import pytest

from mcp_server_factory.component_core.capabilities.templates import (
    BootstrapMcpServerTemplate,
    ToolImplementationGuideTemplate,
)


class TestToolImplementationGuideTemplate:
    def test_defaults(self):
        response = ToolImplementationGuideTemplate().render({})

        assert response.content.startswith("# Implementing the MyTool Tool in Java")
        assert "A tool that does something useful" in response.content
        assert response.metadata == {"toolName": "MyTool", "language": "java"}

    @pytest.mark.parametrize(
        "language,heading",
        [("typescript", "in TypeScript"), ("python", "in Python"), ("PYTHON", "in Python")],
    )
    def test_languages(self, language, heading):
        response = ToolImplementationGuideTemplate().render({"toolName": "word_count", "language": language})

        assert heading in response.content.splitlines()[0]
        assert "word_count" in response.content

    def test_python_guide_uses_class_name(self):
        response = ToolImplementationGuideTemplate().render({"toolName": "word_count", "language": "python"})

        assert "class WordCountAction(Action):" in response.content

    def test_unsupported_language(self):
        response = ToolImplementationGuideTemplate().render({"language": "cobol"})

        assert response.content == "Unsupported language: cobol"
        assert response.metadata is None


class TestBootstrapMcpServerTemplate:
    def test_detect_without_pyproject_is_an_error_text(self, tmp_path: Path):
        response = BootstrapMcpServerTemplate(tmp_path).render({})

        assert response.content.startswith("Error: No build system detected.")
        assert response.metadata is None

    def test_detect_setuptools(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")

        response = BootstrapMcpServerTemplate(tmp_path).render({"serverName": "demo-server"})

        assert response.metadata == {"serverName": "demo-server", "buildSystem": "setuptools"}
        assert 'build-backend = "setuptools.build_meta"' in response.content
        assert "# Bootstrapping demo-server" in response.content

    def test_detect_poetry(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text('[tool.poetry]\nname = "demo"\n', encoding="utf-8")

        response = BootstrapMcpServerTemplate(tmp_path).render({})

        assert response.metadata["buildSystem"] == "poetry"
        assert "[tool.poetry.dependencies]" in response.content

    def test_poetry_mentioned_only_in_a_comment(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text(
            "# migrated off [tool.poetry]\n"
            "[build-system]\n"
            'requires = ["setuptools>=68"]\n'
            'build-backend = "setuptools.build_meta"\n',
            encoding="utf-8",
        )

        assert BootstrapMcpServerTemplate(tmp_path).detect_build_system() == "setuptools"

    def test_poetry_sub_table_only(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text(
            "[tool.poetry.dependencies]\n"
            'python = "^3.11"\n'
            "[build-system]\n"
            'requires = ["poetry-core"]\n'
            'build-backend = "poetry.core.masonry.api"\n',
            encoding="utf-8",
        )

        assert BootstrapMcpServerTemplate(tmp_path).detect_build_system() == "poetry"

    def test_poetry_backend_without_tool_table(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text(
            '[build-system]\nbuild-backend = "poetry.core.masonry.api"\n', encoding="utf-8"
        )

        assert BootstrapMcpServerTemplate(tmp_path).detect_build_system() == "poetry"

    def test_explicit_build_system_skips_detection(self, tmp_path: Path):
        response = BootstrapMcpServerTemplate(tmp_path).render(
            {"buildSystem": "poetry", "packageName": "demo_pkg", "description": "Demo"}
        )

        assert response.metadata["buildSystem"] == "poetry"
        assert 'include = "demo_pkg"' in response.content
        assert "Demo" in response.content

    def test_unsupported_build_system(self, tmp_path: Path):
        response = BootstrapMcpServerTemplate(tmp_path).render({"buildSystem": "maven"})

        assert response.content == "Unsupported build system: maven"

    def test_project_root_defaults_to_settings(self, monkeypatch, tmp_path: Path):
        import mcp_server_factory.server.core.config as config_module

        monkeypatch.setattr(config_module.settings, "project_root", tmp_path)

        assert BootstrapMcpServerTemplate().project_root == tmp_path
