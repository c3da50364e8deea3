"""Custom exceptions for the MySQL MCP server."""


class MySQLMCPError(Exception):
    """Base exception for all MySQL MCP server errors."""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(MySQLMCPError):
    """Exception raised when configuration is invalid. Fatal at startup."""
    pass


class DatabaseConnectionError(MySQLMCPError):
    """Exception raised when the database connection cannot be established."""
    pass


class QueryExecutionError(MySQLMCPError):
    """Exception raised when a statement or introspection query fails."""
    pass


class UnknownOperationError(MySQLMCPError):
    """Exception raised for an unknown tool, resource or prompt name."""
    pass


class ValidationError(MySQLMCPError):
    """Exception raised when operation arguments are missing or invalid."""
    pass
