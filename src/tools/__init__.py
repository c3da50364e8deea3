"""MCP tools package for the MySQL MCP server."""

from tools.base import ToolHandler
from tools.registry import ToolRegistry
from tools.definitions import get_all_tools
from tools.validators import parse_arguments

__all__ = [
    'ToolHandler',
    'ToolRegistry',
    'get_all_tools',
    'parse_arguments',
]
