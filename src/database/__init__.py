"""Database session and catalog modules for the MySQL MCP server."""

from .connector import MySQLConnector, quote_identifier
from .session import SessionManager

__all__ = [
    "MySQLConnector",
    "SessionManager",
    "quote_identifier"
]
