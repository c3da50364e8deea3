"""Base classes for MCP tool handlers."""

from abc import ABC, abstractmethod
from typing import Type

from pydantic import BaseModel

from core.envelope import Success
from core.error_handling import format_success_response, to_json
from database.connector import MySQLConnector


class ToolHandler(ABC):
    """Abstract base class for MCP tool handlers.

    A handler serves exactly one tool. The dispatcher validates the raw
    arguments against ``arguments_model`` before calling :meth:`handle`,
    so handlers only ever see well-formed arguments.
    """

    @property
    @abstractmethod
    def tool_name(self) -> str:
        """Return the tool name this handler serves."""
        pass

    @property
    @abstractmethod
    def arguments_model(self) -> Type[BaseModel]:
        """Return the argument model for this tool."""
        pass

    @abstractmethod
    async def handle(self, arguments: BaseModel, session: MySQLConnector) -> Success:
        """
        Handle tool invocation.

        Args:
            arguments: Validated tool arguments
            session: Open MySQL session

        Returns:
            Success envelope

        Raises:
            QueryExecutionError: if a statement fails
        """
        pass

    def _json_block_response(self, heading: str, data) -> Success:
        """Create a text response with a heading and a fenced JSON block."""
        return format_success_response(f"{heading}\n```json\n{to_json(data)}\n```")
