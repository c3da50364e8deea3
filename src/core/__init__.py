"""Core modules for the MySQL MCP server."""

from .exceptions import (
    MySQLMCPError,
    ConfigurationError,
    DatabaseConnectionError,
    QueryExecutionError,
    UnknownOperationError,
    ValidationError
)

__all__ = [
    "MySQLMCPError",
    "ConfigurationError",
    "DatabaseConnectionError",
    "QueryExecutionError",
    "UnknownOperationError",
    "ValidationError"
]
