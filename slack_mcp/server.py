"""
MCP server instance for Slack MCP.

Binds a ToolDispatcher to the low-level MCP server: tools/list serves the
catalog and tools/call runs the dispatcher.
"""

import logging
from typing import List

from mcp import types
from mcp.server.lowlevel import Server

from slack_mcp.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)

SERVER_NAME = "slack-server"
SERVER_VERSION = "0.1.0"


def create_server(dispatcher: ToolDispatcher) -> Server:
    """
    Create the MCP server for a dispatcher.

    Args:
        dispatcher: Dispatcher bound to an authenticated Slack client

    Returns:
        Server exposing the tools capability only
    """
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return dispatcher.list_tools()

    # Registered directly rather than through @server.call_tool(), which
    # folds every exception (McpError included) into an error result.
    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = await dispatcher.call_tool(
            request.params.name, request.params.arguments
        )
        return types.ServerResult(result)

    server.request_handlers[types.CallToolRequest] = call_tool

    logger.debug(f"Created {SERVER_NAME} with {len(dispatcher.list_tools())} tools")
    return server
