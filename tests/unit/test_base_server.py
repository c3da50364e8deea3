"""
MCP adapter unit tests

Envelope conversion to MCP result shapes.
"""

import pytest
from mcp import types

from core.envelope import Failure, Success
from protocol.base_server import BaseMCPServer, to_call_tool_result, to_resource_contents
from protocol.dispatcher import Dispatcher


class TestToolResults:
    """Tool envelope conversion"""

    def test_success(self):
        """✅ success becomes text content"""
        result = to_call_tool_result(Success.text("Tables:\n```json\n[]\n```"))

        assert result.isError is False
        assert result.content[0].type == "text"
        assert result.content[0].text == "Tables:\n```json\n[]\n```"

    def test_failure(self):
        """❌ failure becomes an error result with the message"""
        result = to_call_tool_result(Failure(message="Unknown operation: nope"))

        assert result.isError is True
        assert result.content[0].text == "Unknown operation: nope"


class TestResourceContents:
    """Resource envelope conversion"""

    def test_success(self):
        """✅ JSON content"""
        contents = to_resource_contents(Success.resource("mysql://schema", '{"tables": []}'))

        assert len(contents) == 1
        assert contents[0].content == '{"tables": []}'
        assert contents[0].mime_type == "application/json"

    def test_failure(self):
        """❌ failures are plain text, never raised"""
        contents = to_resource_contents(Failure(message="Error executing mysql://schema: boom"))

        assert contents[0].content == "Error executing mysql://schema: boom"
        assert contents[0].mime_type == "text/plain"


class TestBaseMCPServer:
    """Server wiring"""

    def test_server_created(self, session_manager):
        """✅ server name and dispatcher wiring"""
        dispatcher = Dispatcher(session_manager)
        server = BaseMCPServer(dispatcher, server_name="test-mysql")

        assert server.server.name == "test-mysql"
        assert server.dispatcher is dispatcher


@pytest.fixture
def mcp_server(session_manager):
    return BaseMCPServer(Dispatcher(session_manager))


def call_tool_request(name, arguments=None):
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


class TestRequestHandlers:
    """Requests routed through the MCP server's registered handlers"""

    @pytest.mark.asyncio
    async def test_call_tool_success(self, mcp_server):
        """✅ tool result passes through unchanged"""
        handler = mcp_server.server.request_handlers[types.CallToolRequest]

        response = await handler(call_tool_request("list_tables", {}))

        result = response.root
        assert isinstance(result, types.CallToolResult)
        assert result.isError is False
        assert result.content[0].text.startswith("Tables:\n```json\n")
        assert '"Tables_in_app": "users"' in result.content[0].text

    @pytest.mark.asyncio
    async def test_call_tool_failure(self, mcp_server):
        """❌ failure envelope becomes an error result"""
        handler = mcp_server.server.request_handlers[types.CallToolRequest]

        response = await handler(call_tool_request("nope"))

        assert response.root.isError is True
        assert response.root.content[0].text == "Unknown operation: nope"

    @pytest.mark.asyncio
    async def test_call_tool_invalid_arguments(self, mcp_server, fake_session):
        """❌ missing arguments are reported by the dispatcher, not the SDK"""
        handler = mcp_server.server.request_handlers[types.CallToolRequest]

        response = await handler(call_tool_request("describe_table", {}))

        assert response.root.isError is True
        assert "Missing required argument: table_name" in response.root.content[0].text
        assert not any(s.startswith("DESCRIBE") for s in fake_session.statements)

    @pytest.mark.asyncio
    async def test_list_tools(self, mcp_server):
        """✅ three tools listed"""
        handler = mcp_server.server.request_handlers[types.ListToolsRequest]

        response = await handler(types.ListToolsRequest(method="tools/list"))

        assert [t.name for t in response.root.tools] == ["execute_query", "describe_table", "list_tables"]

    @pytest.mark.asyncio
    async def test_read_resource(self, mcp_server):
        """✅ resource read returns JSON text"""
        handler = mcp_server.server.request_handlers[types.ReadResourceRequest]
        request = types.ReadResourceRequest(
            method="resources/read",
            params=types.ReadResourceRequestParams(uri="mysql://databases"),
        )

        response = await handler(request)

        contents = response.root.contents
        assert len(contents) == 1
        assert contents[0].mimeType == "application/json"
        assert '"Database": "app"' in contents[0].text
