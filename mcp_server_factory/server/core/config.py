"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class ServerInfoConfig(BaseModel):
    """Identity advertised to MCP clients during initialization."""

    name: str = Field(
        default="mcp-server-factory", alias="MCP_FACTORY_SERVER_NAME", description="Server name sent to clients"
    )
    version: str = Field(default="1.0.0", alias="MCP_FACTORY_SERVER_VERSION", description="Server version")
    instructions: str | None = Field(
        default=None,
        alias="MCP_FACTORY_SERVER_INSTRUCTIONS",
        description="Optional usage instructions sent to clients",
    )

    model_config = {"populate_by_name": True}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", alias="MCP_FACTORY_LOG_LEVEL", description="Console log level")
    format: str = Field(
        default="detailed", alias="MCP_FACTORY_LOG_FORMAT", description="Log line format (simple, detailed, json)"
    )
    enable_file: bool = Field(
        default=False, alias="MCP_FACTORY_ENABLE_FILE_LOGGING", description="Also write logs to a file"
    )
    file_dir: str = Field(default="logs", alias="MCP_FACTORY_LOG_FILE_DIR", description="Directory for log files")

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Server Identity
    # =====================================================================
    server_name: str = Field(
        default="mcp-server-factory",
        description="Server name sent to MCP clients",
        alias="MCP_FACTORY_SERVER_NAME",
    )
    server_version: str = Field(
        default="1.0.0",
        description="Server version sent to MCP clients",
        alias="MCP_FACTORY_SERVER_VERSION",
    )
    server_instructions: str | None = Field(
        default=None,
        description="Optional usage instructions sent to MCP clients",
        alias="MCP_FACTORY_SERVER_INSTRUCTIONS",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="MCP_FACTORY_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="MCP_FACTORY_LOG_FORMAT",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Write logs to a file in addition to stderr",
        alias="MCP_FACTORY_ENABLE_FILE_LOGGING",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for log files",
        alias="MCP_FACTORY_LOG_FILE_DIR",
    )

    # =====================================================================
    # Template Configuration
    # =====================================================================
    project_root: Path = Field(
        default=Path("."),
        description="Directory inspected when a template auto-detects the build system",
        alias="MCP_FACTORY_PROJECT_ROOT",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def server(self) -> ServerInfoConfig:
        """Get server identity configuration."""
        return ServerInfoConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration."""
        return LoggingConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
