"""Configuration management for the MySQL MCP server.

Configuration is read once at process start from environment variables.
A ``.env`` file is loaded first (without overriding variables that are
already set), so the same keys can live in the MCP client configuration or
in a local file.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ConfigurationError

# Load .env: explicit path first, then the usual locations
env_file = os.getenv('ENV_FILE_PATH')
if env_file and Path(env_file).exists():
    load_dotenv(env_file, override=False)
else:
    possible_paths = [
        Path.cwd() / '.env',
        Path(__file__).parent.parent.parent / '.env',  # project root
    ]
    for env_path in possible_paths:
        if env_path.exists():
            load_dotenv(str(env_path), override=False)
            break


DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3306
DEFAULT_USER = "root"


def _first_env(*names: str, default: Optional[str] = None, skip_empty: bool = False) -> Optional[str]:
    """Return the first environment variable in ``names`` that is set.

    A variable set to the empty string counts as set, unless ``skip_empty``
    is given, in which case it falls through to the next name.
    """
    for name in names:
        value = os.getenv(name)
        if value is None or (skip_empty and value == ""):
            continue
        return value
    return default


def _env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, "true" if default else "false").lower() in ("1", "true", "yes")


def _format_validation_error(error: PydanticValidationError) -> str:
    parts = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item["loc"]) or "config"
        parts.append(f"{field}: {item['msg']}")
    return "; ".join(parts)


class ConnectionConfig(BaseModel):
    """MySQL connection parameters. Immutable once constructed."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(description="MySQL server hostname or IP")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, description="MySQL server port")
    user: str = Field(description="MySQL user name")
    password: str = Field(default="", repr=False, description="MySQL password")
    database: Optional[str] = Field(default=None, description="Default database selected on connect")
    connect_timeout: int = Field(default=10, ge=1, description="Connection timeout in seconds")

    @field_validator("host", "user")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("database")
    @classmethod
    def _empty_database_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @classmethod
    def from_env(cls) -> "ConnectionConfig":
        """Create connection configuration from environment variables.

        Raises:
            ConfigurationError: if host or user resolve empty, or the port
                is not a valid TCP port.
        """
        raw_port = _first_env("MYSQL_PORT", default=str(DEFAULT_PORT))
        raw_timeout = _first_env("MYSQL_CONNECT_TIMEOUT", default="10")
        try:
            port = int(raw_port)
            connect_timeout = int(raw_timeout)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid MySQL configuration: {e}",
                {"MYSQL_PORT": raw_port, "MYSQL_CONNECT_TIMEOUT": raw_timeout}
            ) from e

        try:
            return cls(
                host=_first_env("MYSQL_HOST", default=DEFAULT_HOST),
                port=port,
                user=_first_env("MYSQL_USER", default=DEFAULT_USER),
                password=_first_env("MYSQL_PASSWORD", "MYSQL_PASS", default="", skip_empty=True),
                database=_first_env("MYSQL_DATABASE", "MYSQL_DB", skip_empty=True),
                connect_timeout=connect_timeout,
            )
        except PydanticValidationError as e:
            raise ConfigurationError(
                "Incomplete MySQL configuration. Check MYSQL_HOST, MYSQL_PORT and MYSQL_USER: "
                + _format_validation_error(e)
            ) from e

    def describe(self) -> str:
        """Short, password-free description for log lines."""
        return f"{self.user}@{self.host}:{self.port}/{self.database or ''}"


class AppConfig(BaseModel):
    """Application configuration combining all configs."""

    connection: ConnectionConfig
    server_name: str = Field(default="mysql-mcp-server", description="MCP server name identifier")
    server_version: str = Field(default="1.0.0", description="Version reported to MCP clients")
    resource_scheme: str = Field(default="mysql", description="URI scheme of exposed resources")
    connect_on_startup: bool = Field(default=False, description="Connect before the transport attaches")
    log_level: str = Field(default="INFO", description="Logging level for the stderr log")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create full application configuration from environment variables."""
        return cls(
            connection=ConnectionConfig.from_env(),
            server_name=os.getenv("MCP_SERVER_NAME", "mysql-mcp-server"),
            resource_scheme=os.getenv("MYSQL_RESOURCE_SCHEME", "mysql"),
            connect_on_startup=_env_bool("MYSQL_CONNECT_ON_STARTUP"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
