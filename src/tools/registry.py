"""Tool registry mapping MCP tool names to handlers."""

import logging
from typing import Dict, List, Optional

from mcp.types import Tool

from tools.base import ToolHandler
from tools.definitions import get_all_tools
from tools.handlers import (
    ExecuteQueryHandler,
    DescribeTableHandler,
    ListTablesHandler,
)

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Central registry for MCP tool handlers.

    The set of tools is closed: every name in :func:`get_all_tools` has
    exactly one handler and nothing else is routable.
    """

    def __init__(self):
        self.handlers: Dict[str, ToolHandler] = {}
        self._register_handlers()

    def _register_handlers(self):
        """Register all tool handlers."""
        handler_classes = [
            ExecuteQueryHandler,
            DescribeTableHandler,
            ListTablesHandler,
        ]

        for handler_class in handler_classes:
            handler = handler_class()
            self.handlers[handler.tool_name] = handler
            logger.debug(f"Registered {handler.tool_name} -> {handler_class.__name__}")

        logger.info(f"Registered {len(self.handlers)} MCP tools")

    def get_handler(self, tool_name: str) -> Optional[ToolHandler]:
        """Return the handler for ``tool_name``, or None if unknown."""
        return self.handlers.get(tool_name)

    def list_tools(self) -> List[Tool]:
        return [tool for tool in get_all_tools() if tool.name in self.handlers]
