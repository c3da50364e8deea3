"""Operation dispatcher - transport-agnostic request routing.

The dispatcher is the only component that talks to the session manager.
For tool calls and resource reads it:

1. ensures a session exists (connecting on first use),
2. resolves the name or URI in a closed registry,
3. validates the arguments against the tool's argument model,
4. runs the handler with the session passed in explicitly,

and converts every failure along the way into a ``Failure`` envelope.
Nothing raised by a handler escapes :meth:`call_tool` or
:meth:`read_resource`.
"""

import logging
from typing import Any, Dict, List, Optional

from mcp.types import GetPromptResult, Prompt, Resource, Tool

from core.envelope import Envelope, Success
from core.error_handling import format_error_response, to_json
from core.exceptions import UnknownOperationError
from database.session import SessionManager
from prompts.registry import PromptRegistry
from resources.registry import ResourceRegistry
from tools.registry import ToolRegistry
from tools.validators import parse_arguments

logger = logging.getLogger(__name__)


class Dispatcher:
    """Routes tool calls, resource reads and prompt requests."""

    def __init__(
        self,
        session_manager: SessionManager,
        tool_registry: Optional[ToolRegistry] = None,
        resource_registry: Optional[ResourceRegistry] = None,
        prompt_registry: Optional[PromptRegistry] = None,
    ):
        self.session_manager = session_manager
        self.tool_registry = tool_registry or ToolRegistry()
        self.resource_registry = resource_registry or ResourceRegistry()
        self.prompt_registry = prompt_registry or PromptRegistry()

    def list_tools(self) -> List[Tool]:
        return self.tool_registry.list_tools()

    def list_resources(self) -> List[Resource]:
        return self.resource_registry.list_resources()

    def list_prompts(self) -> List[Prompt]:
        return self.prompt_registry.list_prompts()

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Envelope:
        """Execute tool ``name``; always returns an envelope."""
        try:
            session = await self.session_manager.ensure_connected()

            handler = self.tool_registry.get_handler(name)
            if handler is None:
                raise UnknownOperationError(f"Unknown operation: {name}")

            validated = parse_arguments(handler.arguments_model, arguments)

            logger.debug(f"Routing {name} to {handler.__class__.__name__}")
            return await handler.handle(validated, session)
        except Exception as e:
            return format_error_response(e, name)

    async def read_resource(self, uri: str) -> Envelope:
        """Read resource ``uri``; always returns an envelope."""
        uri = str(uri)
        try:
            session = await self.session_manager.ensure_connected()

            handler = self.resource_registry.get_handler(uri)
            if handler is None:
                raise UnknownOperationError(f"Unknown resource: {uri}")

            data = await handler.read(session)
            return Success.resource(self.resource_registry.uri_for(handler), to_json(data))
        except Exception as e:
            return format_error_response(e, uri)

    def get_prompt(self, name: str, arguments: Optional[Dict[str, str]] = None) -> GetPromptResult:
        """Render a static prompt. Errors propagate to the protocol runtime."""
        return self.prompt_registry.get_prompt(name, arguments)
