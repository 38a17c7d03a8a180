"""
Tool dispatcher for the Slack MCP server.

Resolves a tool call against the registry, runs its handler against the
Slack WebClient, and shapes the outcome into a CallToolResult.

Unknown tool names raise McpError(METHOD_NOT_FOUND). Failures inside a known
tool never propagate: they come back as a result with isError set.
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

from mcp import types
from mcp.shared.exceptions import McpError
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from slack_mcp.config import SlackConfig
from slack_mcp.tools import registry as default_registry
from slack_mcp.tools.registration import RegisteredTool, ToolRegistry

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Slack API error"


def text_result(payload: Any) -> types.CallToolResult:
    """Wrap a JSON-serializable payload in a single text block."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=json.dumps(payload, indent=2))],
        isError=False,
    )


def error_result(message: str) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=f"{ERROR_PREFIX}: {message}")],
        isError=True,
    )


def describe_error(error: Exception) -> str:
    """
    Extract a human readable message from a handler failure.

    SlackApiError carries Slack's error code (e.g. "channel_not_found") in
    its response; anything else falls back to the exception text.
    """
    if isinstance(error, SlackApiError) and error.response is not None:
        try:
            code = error.response.get("error")
        except AttributeError:
            code = None
        if code:
            return str(code)
    return str(error) or error.__class__.__name__


class ToolDispatcher:
    """Executes registered Slack tools for one workspace."""

    def __init__(
        self,
        client: WebClient,
        config: SlackConfig,
        tools: Optional[ToolRegistry] = None,
    ):
        self._client = client
        self._config = config
        self._tools = tools if tools is not None else default_registry

    @property
    def config(self) -> SlackConfig:
        return self._config

    def list_tools(self) -> List[types.Tool]:
        """Return the tool catalog advertised on tools/list."""
        return self._tools.descriptors()

    async def call_tool(
        self, name: str, arguments: Optional[Dict[str, Any]] = None
    ) -> types.CallToolResult:
        """
        Execute a tool by name.

        Args:
            name: Registered tool name
            arguments: Tool arguments (None is treated as empty)

        Returns:
            CallToolResult holding the JSON payload, or an error-flagged result

        Raises:
            McpError: If no tool with that name is registered
        """
        tool = self._tools.get(name)
        if tool is None:
            logger.warning(f"Unknown tool requested: {name}")
            raise McpError(
                types.ErrorData(
                    code=types.METHOD_NOT_FOUND,
                    message=f"Unknown tool: {name}",
                )
            )
        return await self._invoke(tool, arguments or {})

    async def _invoke(
        self, tool: RegisteredTool, arguments: Dict[str, Any]
    ) -> types.CallToolResult:
        logger.info(f"Calling tool {tool.name}")
        try:
            # WebClient is blocking
            payload = await asyncio.to_thread(
                tool.handler, self._client, self._config, arguments
            )
            return text_result(payload)
        except Exception as e:
            logger.warning(f"Tool {tool.name} failed: {e}")
            return error_result(describe_error(e))
