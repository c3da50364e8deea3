"""MCP tool definitions for the MySQL MCP server."""

from typing import List
from mcp.types import Tool


# Tool names (used for matching in handlers)
TOOL_EXECUTE_QUERY = "execute_query"
TOOL_DESCRIBE_TABLE = "describe_table"
TOOL_LIST_TABLES = "list_tables"

_DATABASE_PROPERTY = {
    "type": "string",
    "description": (
        "Optional database to switch to before running. "
        "The switch persists for later calls on the same session."
    )
}


def get_all_tools() -> List[Tool]:
    """Return all MCP tool definitions."""
    return [
        Tool(
            name=TOOL_EXECUTE_QUERY,
            description=(
                "Execute a SQL statement on the MySQL database and return the resulting rows as JSON. "
                "The statement is sent verbatim; use 'list_tables' and 'describe_table' first "
                "to discover table and column names."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "The SQL statement to execute"
                    },
                    "database": _DATABASE_PROPERTY
                },
                "required": ["query"]
            }
        ),
        Tool(
            name=TOOL_DESCRIBE_TABLE,
            description="Describe the structure (columns, types, keys) of a table",
            inputSchema={
                "type": "object",
                "properties": {
                    "table_name": {
                        "type": "string",
                        "description": "Name of the table to describe"
                    },
                    "database": _DATABASE_PROPERTY
                },
                "required": ["table_name"]
            }
        ),
        Tool(
            name=TOOL_LIST_TABLES,
            description="List all tables of the current (or given) database",
            inputSchema={
                "type": "object",
                "properties": {
                    "database": _DATABASE_PROPERTY
                },
                "required": []
            }
        ),
    ]
