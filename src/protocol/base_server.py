"""Base MCP server - binds the dispatcher to the MCP protocol runtime.

This module converts between MCP request shapes and the dispatcher's
envelopes independent of the transport mechanism.
"""

import logging
from typing import Iterable, List

from mcp import types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents

from core.envelope import Envelope, Failure
from protocol.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


def to_call_tool_result(envelope: Envelope) -> types.CallToolResult:
    """Convert a tool envelope into an MCP tool result."""
    if isinstance(envelope, Failure):
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=envelope.message)],
            isError=True
        )
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block.text) for block in envelope.content],
        isError=False
    )


def to_resource_contents(envelope: Envelope) -> List[ReadResourceContents]:
    """Convert a resource envelope into MCP resource contents.

    Failures are returned as plain-text content rather than raised.
    """
    if isinstance(envelope, Failure):
        return [ReadResourceContents(content=envelope.message, mime_type="text/plain")]
    return [
        ReadResourceContents(content=block.text, mime_type=block.mime_type)
        for block in envelope.content
    ]


class BaseMCPServer:
    """Base MCP server providing core protocol functionality.

    This class encapsulates the MCP protocol logic independent of
    the transport mechanism.
    """

    def __init__(self, dispatcher: Dispatcher, server_name: str = "mysql-mcp-server", server_version: str = "1.0.0"):
        """Initialize base MCP server.

        Args:
            dispatcher: Dispatcher serving all requests
            server_name: Name of the MCP server
            server_version: Version reported to clients
        """
        self.dispatcher = dispatcher
        self.server = Server(server_name, version=server_version)
        self._setup_handlers()
        logger.info(f"Initialized {server_name} MCP server")

    def _setup_handlers(self):
        """Setup MCP protocol handlers."""

        @self.server.list_tools()
        async def list_tools() -> List[types.Tool]:
            return self.dispatcher.list_tools()

        # Arguments are validated by the dispatcher's own models
        @self.server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: dict) -> types.CallToolResult:
            envelope = await self.dispatcher.call_tool(name, arguments or {})
            return to_call_tool_result(envelope)

        @self.server.list_resources()
        async def list_resources() -> List[types.Resource]:
            return self.dispatcher.list_resources()

        @self.server.read_resource()
        async def read_resource(uri) -> Iterable[ReadResourceContents]:
            envelope = await self.dispatcher.read_resource(str(uri))
            return to_resource_contents(envelope)

        @self.server.list_prompts()
        async def list_prompts() -> List[types.Prompt]:
            return self.dispatcher.list_prompts()

        @self.server.get_prompt()
        async def get_prompt(name: str, arguments: dict = None) -> types.GetPromptResult:
            return self.dispatcher.get_prompt(name, arguments)
