"""MCP resources package for the MySQL MCP server."""

from resources.base import ResourceHandler
from resources.registry import ResourceRegistry

__all__ = [
    'ResourceHandler',
    'ResourceRegistry',
]
